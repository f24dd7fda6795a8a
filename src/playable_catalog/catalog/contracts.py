"""
Data contracts for the catalog served by ``GET /api/list-all``.

An entry is managed in exactly one of two ways:

- Flat: one directly launchable artifact, wire form ``{"Plain": "<token>"}``.
- Layered: one or more launchable instances, wire form ``{"SugarCube": [...]}``.

All models are frozen; a refetch replaces them wholesale.
"""

from collections.abc import Iterable
from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

# Opaque identifier, never parsed
Identifier = Annotated[str, Field(min_length=1)]

# (mod_name, mod_sub_id)
ModOverlay: TypeAlias = tuple[str, str]


class _Snapshot(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class Instance(_Snapshot):
    """One launchable unit within a layered entry."""

    id: Identifier = Field(..., description="Launch sub-identifier, unique within the entry")
    name: str | None = Field(default=None, description="Display name")
    index: str = Field(..., description="Ordering/display label, opaque")
    layers: tuple[str, ...] = Field(
        default=(),
        description="Contributing layers, top-to-bottom",
    )
    mods: tuple[ModOverlay, ...] | None = Field(
        default=None,
        description="Mod overlays applied atop the layers (None = no mods)",
    )

    @property
    def display_name(self) -> str:
        """Name if present, otherwise the id."""
        return self.name if self.name is not None else self.id

    @property
    def has_mods(self) -> bool:
        """Check if any mod overlay is applied."""
        return bool(self.mods)


class FlatManagement(_Snapshot):
    """Single directly launchable artifact."""

    launch_token: Identifier = Field(..., alias="Plain")


class LayeredManagement(_Snapshot):
    """Composition of independently launchable instances."""

    instances: tuple[Instance, ...] = Field(..., alias="SugarCube")

    @model_validator(mode="after")
    def check_unique_instance_ids(self) -> "LayeredManagement":
        _ensure_unique((i.id for i in self.instances), "instance")
        return self


Management: TypeAlias = FlatManagement | LayeredManagement


class Entry(_Snapshot):
    """One catalog item."""

    id: Identifier = Field(..., description="Catalog-unique id, first launch path segment")
    name: str | None = Field(default=None, description="Display name")
    management: Management = Field(..., alias="manage")

    @property
    def display_name(self) -> str:
        """Name if present, otherwise the id."""
        return self.name if self.name is not None else self.id


_CATALOG_ADAPTER = TypeAdapter(list[Entry])


def _ensure_unique(ids: Iterable[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {kind} id: {item_id!r}")
        seen.add(item_id)


def parse_catalog(raw_data: Any) -> list[Entry]:
    """
    Validate a decoded ``/api/list-all`` payload.

    Args:
        raw_data: Decoded JSON body (expected to be an array)

    Returns:
        list[Entry]: Entries in payload order

    Raises:
        pydantic.ValidationError: If any element doesn't match the entry shape
        ValueError: If entry ids are not unique
    """
    entries = _CATALOG_ADAPTER.validate_python(raw_data)
    _ensure_unique((e.id for e in entries), "entry")
    return entries
