"""
Playable Catalog Client.

Fetches the catalog of playable entries from the backend and
resolves a user's selection into a launch destination.
"""

from playable_catalog.config import Settings, get_settings
from playable_catalog.logger import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
