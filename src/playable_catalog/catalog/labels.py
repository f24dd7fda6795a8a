"""Short human-readable tags for management variants."""

from typing import assert_never

from playable_catalog.catalog.contracts import Entry, FlatManagement, LayeredManagement

FLAT_LABEL = "Plain HTML"
LAYERED_LABEL = "SugarCube ML"


def label_for(entry: Entry) -> str:
    """
    Map an entry's management variant to its display tag.

    Args:
        entry: Catalog entry

    Returns:
        "Plain HTML" for flat entries, "SugarCube ML" for layered ones
    """
    management = entry.management
    if isinstance(management, FlatManagement):
        return FLAT_LABEL
    elif isinstance(management, LayeredManagement):
        return LAYERED_LABEL
    else:
        assert_never(management)
