"""
Launch destination resolution.

A destination is the ``(entry_id, sub_id)`` pair, rendered as
``/play/{entry_id}/{sub_id}/index-path``:

- flat entries use their launch token as ``sub_id``
- layered entries use the selected instance's id

Nothing here checks the pair against the current catalog; the
backend owns that.
"""

from dataclasses import dataclass
from typing import assert_never
from urllib.parse import quote

import httpx

from playable_catalog.catalog.contracts import Entry, FlatManagement, LayeredManagement

PLAY_PREFIX = "/play"
INDEX_SEGMENT = "index-path"
DOT_SEGMENTS = frozenset({".", ".."})


def _segment(value: str) -> str:
    # Ids are opaque: "/" must not split a segment, "." and ".." must not be collapsed
    if value in DOT_SEGMENTS:
        return value.replace(".", "%2E")
    return quote(value, safe="")


@dataclass(frozen=True)
class LaunchDestination:
    """Navigable locator for one launchable unit."""

    entry_id: str
    sub_id: str

    @property
    def path(self) -> str:
        """Server-relative path of the launch page."""
        return f"{PLAY_PREFIX}/{_segment(self.entry_id)}/{_segment(self.sub_id)}/{INDEX_SEGMENT}"

    def url(self, base_url: str) -> str:
        """
        Absolute URL for a full-page navigation.

        Args:
            base_url: Backend root, e.g. http://127.0.0.1:3500 or http://host/uni

        Returns:
            str: The launch path appended under base_url, keeping any path prefix
        """
        return str(httpx.URL(base_url.rstrip("/") + self.path))

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class LaunchOption:
    """A selectable way to launch an entry."""

    label: str
    destination: LaunchDestination


def resolve_launch(entry_id: str, sub_id: str) -> LaunchDestination:
    """
    Build the launch destination for an entry and sub-identifier.

    Args:
        entry_id: Catalog entry id
        sub_id: Launch token (flat) or instance id (layered)

    Returns:
        LaunchDestination: Deterministic locator for the pair

    Raises:
        ValueError: If either identifier is empty
    """
    if not entry_id:
        raise ValueError("entry_id must be a non-empty string")
    if not sub_id:
        raise ValueError("sub_id must be a non-empty string")
    return LaunchDestination(entry_id=entry_id, sub_id=sub_id)


def launch_options(entry: Entry) -> list[LaunchOption]:
    """
    Enumerate the launch choices an entry offers.

    Flat entries offer exactly one option; layered entries offer one
    per instance, in instance order (none when there are no instances).
    """
    management = entry.management
    if isinstance(management, FlatManagement):
        return [
            LaunchOption(
                label=entry.display_name,
                destination=resolve_launch(entry.id, management.launch_token),
            )
        ]
    elif isinstance(management, LayeredManagement):
        return [
            LaunchOption(
                label=instance.display_name,
                destination=resolve_launch(entry.id, instance.id),
            )
            for instance in management.instances
        ]
    else:
        assert_never(management)
