"""
Playable Catalog.

Entry model, display labels, launch resolution and the
session-wide catalog store.
"""

from playable_catalog.catalog.client import (
    CatalogClient,
    CatalogError,
    FetchError,
    PayloadError,
)
from playable_catalog.catalog.contracts import (
    Entry,
    FlatManagement,
    Instance,
    LayeredManagement,
    Management,
    parse_catalog,
)
from playable_catalog.catalog.labels import FLAT_LABEL, LAYERED_LABEL, label_for
from playable_catalog.catalog.launch import (
    LaunchDestination,
    LaunchOption,
    launch_options,
    resolve_launch,
)
from playable_catalog.catalog.store import CatalogStore

__all__ = [
    # Model
    "Entry",
    "FlatManagement",
    "Instance",
    "LayeredManagement",
    "Management",
    "parse_catalog",
    # Resolvers
    "FLAT_LABEL",
    "LAYERED_LABEL",
    "label_for",
    "LaunchDestination",
    "LaunchOption",
    "launch_options",
    "resolve_launch",
    # Fetching
    "CatalogClient",
    "CatalogError",
    "CatalogStore",
    "FetchError",
    "PayloadError",
]
