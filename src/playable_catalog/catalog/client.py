"""
HTTP client for the catalog backend.

Fetches ``/api/list-all`` and validates it into entries. Failures are
raised as ``CatalogError`` subclasses; there is no retry here.
"""

import time
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from playable_catalog.catalog.contracts import Entry, parse_catalog
from playable_catalog.config import get_settings
from playable_catalog.logger import get_logger


class CatalogError(Exception):
    """Base exception for catalog retrieval errors."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class FetchError(CatalogError):
    """Raised on network errors and non-2xx responses."""

    pass


class PayloadError(CatalogError):
    """Raised when the response body doesn't match the entry shape."""

    pass


class CatalogClient:
    """
    Client for the catalog backend.

    Example:
        >>> async with CatalogClient() as client:
        ...     entries = await client.fetch_entries()
    """

    source_name = "catalog_api"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        list_path: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Backend origin (settings value if None)
            list_path: Catalog endpoint path (settings value if None)
            timeout: HTTP request timeout in seconds
        """
        settings = get_settings()
        self._base_url = (base_url or settings.catalog.base_url).rstrip("/")
        self._list_path = list_path or settings.catalog.list_path
        self._timeout = timeout or settings.catalog.timeout_seconds
        self._logger = get_logger(
            self.__class__.__name__,
            component="client",
            source=self.source_name,
        )
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                headers={
                    "User-Agent": "PlayableCatalogClient/1.0",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _build_url(self) -> str:
        return f"{self._base_url}{self._list_path}"

    async def _make_request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Make a single HTTP request.

        Raises:
            FetchError: On transport failure or an error status
        """
        self._logger.debug("Making request", method=method, url=url)

        try:
            response = await self.client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                f"Request failed: {e}",
                source=self.source_name,
                endpoint=url,
                original_error=e,
            ) from e

        if not response.is_success:
            raise FetchError(
                f"API error: {response.status_code}",
                source=self.source_name,
                endpoint=url,
                status_code=response.status_code,
            )

        return response

    def _parse_response(self, response: httpx.Response) -> list[Entry]:
        """
        Decode and validate the catalog body.

        Raises:
            PayloadError: If the body is not JSON or not a valid catalog
        """
        endpoint = str(response.request.url)
        try:
            raw_data = response.json()
        except ValueError as e:
            raise PayloadError(
                "Response body is not valid JSON",
                source=self.source_name,
                endpoint=endpoint,
                status_code=response.status_code,
                original_error=e,
            ) from e

        try:
            return parse_catalog(raw_data)
        except (PydanticValidationError, ValueError) as e:
            raise PayloadError(
                f"Response validation failed: {e}",
                source=self.source_name,
                endpoint=endpoint,
                status_code=response.status_code,
                original_error=e,
            ) from e

    async def fetch_entries(self) -> list[Entry]:
        """
        Fetch and validate the full catalog.

        Returns:
            list[Entry]: Entries in response order

        Raises:
            FetchError: On network errors or non-2xx responses
            PayloadError: On malformed payloads
        """
        url = self._build_url()
        start_time = time.perf_counter()

        response = await self._make_request("GET", url)
        entries = self._parse_response(response)

        self._logger.info(
            "Catalog fetched",
            url=url,
            entries=len(entries),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return entries
