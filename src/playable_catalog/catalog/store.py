"""
Catalog Store.

Owns the in-memory catalog for the session. ``refresh()`` is the only
mutator and replaces the whole list at once.
"""

from datetime import datetime, timezone
from typing import Any

from playable_catalog.catalog.client import CatalogClient, CatalogError
from playable_catalog.catalog.contracts import Entry
from playable_catalog.logger import get_logger


class CatalogStore:
    """
    Holds the last successfully fetched catalog.

    Overlapping ``refresh()`` calls are not fenced: whichever response
    resolves last is installed. Callers that want to avoid wasted
    requests must not start a refresh while one is in flight.

    Example:
        >>> async with CatalogStore() as store:
        ...     await store.refresh()
        ...     for entry in store.entries:
        ...         print(entry.display_name)
    """

    def __init__(self, client: CatalogClient | None = None) -> None:
        """
        Initialize an empty store.

        Args:
            client: Fetch layer to use (a default client owned by the store if None)
        """
        self._owns_client = client is None
        self._client = client or CatalogClient()
        self._entries: tuple[Entry, ...] = ()
        self._last_refreshed_at: datetime | None = None
        self._logger = get_logger(__name__, component="catalog_store")

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Current catalog snapshot, in response order."""
        return self._entries

    @property
    def last_refreshed_at(self) -> datetime | None:
        """When the current snapshot was installed (None before the first success)."""
        return self._last_refreshed_at

    def get(self, entry_id: str) -> Entry | None:
        """Look up an entry of the current snapshot by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    async def refresh(self) -> bool:
        """
        Fetch the catalog and install it.

        On failure the previous snapshot is kept and the error is logged.

        Returns:
            bool: True if a new snapshot was installed
        """
        try:
            entries = await self._client.fetch_entries()
        except CatalogError as e:
            self._logger.error(
                "Catalog refresh failed",
                error=str(e),
                error_type=type(e).__name__,
                endpoint=e.endpoint,
                status_code=e.status_code,
                kept_entries=len(self._entries),
            )
            return False

        self._entries = tuple(entries)
        self._last_refreshed_at = datetime.now(timezone.utc)
        self._logger.info("Catalog refreshed", entries=len(self._entries))
        return True

    async def close(self) -> None:
        """Close the fetch layer if this store created it."""
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> "CatalogStore":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
