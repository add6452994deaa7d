"""
Async client for the PokeAPI REST service.

Every operation swallows transport errors, non-success statuses and malformed
payloads: the failure is logged and an empty list or None is returned. Callers
must therefore treat an empty listing as either the end of the data or a
failed request.
"""

from typing import Any, Optional, Type, TypeVar, Union

import httpx
import orjson
from dacite import DaciteError, from_dict

from dex_browser_core.utils.core.config_registry import resolve_config
from dex_browser_core.utils.core.logger import get_logger
from dex_browser_core.utils.data.models import (
    DACITE_CONFIG,
    ListingEntry,
    NamedResource,
    Pokemon,
)

logger = get_logger(__name__)

T = TypeVar("T")


class PokeAPIClient:
    """
    Read-only client for the PokeAPI endpoints used by the browser.

    The client owns an `httpx.AsyncClient` unless one is passed in, and can be
    used as an async context manager:

        async with PokeAPIClient(config) as client:
            entries = await client.fetch_listing(limit=20)

    Requests are awaited one at a time by the caller; the client adds no
    caching, deduplication or retries.
    """

    def __init__(self, config=None, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the client.

        Args:
            config: BrowserConfig instance. If None, uses the global config or defaults.
            http_client (Optional[httpx.AsyncClient], optional): Session to reuse. Defaults to None.
        """
        self.config = resolve_config(config)
        self.base_url = self.config.api_base_url
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.config.request_timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )

    async def __aenter__(self) -> "PokeAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    def resolve_detail_url(self, id_or_url: Union[int, str]) -> str:
        """Build the detail URL for a Pokemon.

        Strings starting with "http" are taken as URLs; anything else is an ID or
        name. Both are normalized to end with a single slash, so an ID and the
        URL the listing returns for it resolve to the same request.

        Args:
            id_or_url (Union[int, str]): ID, name or full URL.

        Returns:
            str: The canonical detail URL.
        """
        if isinstance(id_or_url, str) and id_or_url.startswith("http"):
            url = id_or_url
        else:
            url = f"{self.base_url}/pokemon/{id_or_url}"
        return url.rstrip("/") + "/"

    async def fetch_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Optional[Any]:
        """GET a URL and decode its JSON body.

        Args:
            url (str): The URL to fetch.
            params (Optional[dict[str, Any]], optional): Query parameters. Defaults to None.

        Returns:
            Optional[Any]: The decoded JSON, or None if the request failed.
        """
        logger.debug(f"GET {url}", extra={"params": params})
        try:
            response = await self._http.get(url, params=params)
            response.raise_for_status()
            return orjson.loads(response.content)
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching {url}: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching {url}: {e!r}")
        except httpx.InvalidURL as e:
            logger.error(f"Invalid URL {url!r}: {e}")
        except orjson.JSONDecodeError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
        return None

    async def fetch_resource(self, url: str, data_class: Type[T]) -> Optional[T]:
        """GET a URL and structure its JSON body into a dataclass.

        Args:
            url (str): The URL to fetch.
            data_class (Type[T]): Dataclass to build from the payload.

        Returns:
            Optional[T]: The record, or None if the request or structuring failed.
        """
        data = await self.fetch_json(url)
        if data is None:
            return None

        try:
            return from_dict(data_class=data_class, data=data, config=DACITE_CONFIG)
        except (DaciteError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error deserializing {data_class.__name__} from {url}: {e}")
            return None

    async def _fetch_results(self, url: str, params: Optional[dict[str, Any]] = None) -> list[dict]:
        """Fetch a paginated endpoint and return its raw `results` list."""
        data = await self.fetch_json(url, params=params)
        if data is None:
            return []

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            logger.error(f"Missing 'results' list in response from {url}")
            return []
        return results

    async def fetch_listing(self, limit: Optional[int] = None, offset: int = 0) -> list[ListingEntry]:
        """Fetch one page of the Pokemon listing.

        Args:
            limit (Optional[int], optional): Page size. Defaults to config.page_size.
            offset (int, optional): Index of the first entry. Defaults to 0.

        Returns:
            list[ListingEntry]: Entries in API order, at most `limit` long; empty on failure.
        """
        if limit is None:
            limit = self.config.page_size

        url = f"{self.base_url}/pokemon"
        results = await self._fetch_results(url, params={"limit": limit, "offset": offset})

        try:
            entries = [
                from_dict(data_class=ListingEntry, data=item, config=DACITE_CONFIG)
                for item in results[:limit]
            ]
        except (DaciteError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error deserializing Pokemon listing (limit={limit}, offset={offset}): {e}")
            return []

        logger.debug(f"Fetched {len(entries)} listing entries (limit={limit}, offset={offset})")
        return entries

    async def fetch_item_detail(self, id_or_url: Union[int, str]) -> Optional[Pokemon]:
        """Fetch the full detail record for one Pokemon.

        Args:
            id_or_url (Union[int, str]): ID, name or full detail URL.

        Returns:
            Optional[Pokemon]: The detail record, or None on any failure.
        """
        return await self.fetch_resource(self.resolve_detail_url(id_or_url), Pokemon)

    async def fetch_all_type_names(self) -> list[NamedResource]:
        """Fetch the list of Pokemon types.

        Returns:
            list[NamedResource]: Type references in API order; empty on failure.
        """
        url = f"{self.base_url}/type"
        results = await self._fetch_results(url)

        try:
            return [
                from_dict(data_class=NamedResource, data=item, config=DACITE_CONFIG)
                for item in results
            ]
        except (DaciteError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error deserializing type list: {e}")
            return []
