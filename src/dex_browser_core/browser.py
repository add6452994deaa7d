"""
Catalog browser: wires the API client, the views and the document together.

A page load paints placeholder cards from the listing, then hydrates their type
badges. Opening a detail fetches the Pokemon and its species concurrently and
mounts the overlay; closing it discards the detail.
"""

import asyncio
from typing import Optional, Union

from dex_browser_core.utils.core.client import PokeAPIClient
from dex_browser_core.utils.core.config_registry import resolve_config
from dex_browser_core.utils.core.document import Document, set_inner_html
from dex_browser_core.utils.core.logger import LogContext, get_logger
from dex_browser_core.utils.data.models import ListingEntry, NamedResource, Pokemon, PokemonSpecies
from dex_browser_core.utils.formatters.html_formatter import format_type_filter
from dex_browser_core.utils.text.text_util import id_from_url
from dex_browser_core.views.detail_view import render_detail_overlay
from dex_browser_core.views.grid_view import render_grid
from dex_browser_core.views.hydrator import hydrate_types

logger = get_logger(__name__)


class CatalogBrowser:
    """
    Stateful front end over one document.

    Example:
        async with PokeAPIClient(config) as client:
            browser = CatalogBrowser(config, client)
            await browser.load_page()
            await browser.open_detail(25)
            html = browser.to_html()
    """

    def __init__(
        self,
        config=None,
        client: Optional[PokeAPIClient] = None,
        document: Optional[Document] = None,
    ):
        """Initialize the browser.

        Args:
            config: BrowserConfig instance. If None, uses the global config or defaults.
            client (Optional[PokeAPIClient], optional): API client. Defaults to a new client.
            document (Optional[Document], optional): Target document. Defaults to a fresh page shell.
        """
        self.config = resolve_config(config)
        self.client = client or PokeAPIClient(self.config)
        self.document = document or Document()

        self.offset = 0
        self.entries: list[ListingEntry] = []
        self.types: list[NamedResource] = []
        self.current_detail: Optional[Pokemon] = None

    @property
    def page_size(self) -> int:
        return self.config.page_size

    async def load_page(self, offset: Optional[int] = None) -> list[ListingEntry]:
        """Load a page of the listing, paint it and hydrate its type badges.

        Args:
            offset (Optional[int], optional): Index of the first entry. Defaults to the current offset.

        Returns:
            list[ListingEntry]: The entries that were rendered (empty on failure or past the end).
        """
        if offset is not None:
            self.offset = max(0, offset)

        async with LogContext(logger, f"loading page at offset {self.offset}"):
            self.entries = await self.client.fetch_listing(self.page_size, self.offset)

            container = self.document.grid
            if container is None:
                logger.warning("Document has no grid container; skipping render")
                return self.entries

            render_grid(self.entries, container, self.config)
            await hydrate_types(self.entries, self.document, self.client)

        return self.entries

    async def next_page(self) -> list[ListingEntry]:
        """Load the page after the current one."""
        return await self.load_page(self.offset + self.page_size)

    async def previous_page(self) -> list[ListingEntry]:
        """Load the page before the current one (stops at the first page)."""
        return await self.load_page(self.offset - self.page_size)

    async def load_type_filter(self) -> list[NamedResource]:
        """Fetch the type list and render it into the filter control.

        Returns:
            list[NamedResource]: The types (empty on failure).
        """
        self.types = await self.client.fetch_all_type_names()

        select = self.document.type_filter
        if select is not None:
            set_inner_html(select, format_type_filter(self.types))

        return self.types

    def species_url(self, id_or_url: Union[int, str]) -> str:
        """Build the species URL for a Pokemon ID or detail URL.

        Args:
            id_or_url (Union[int, str]): ID, name or full detail URL.

        Returns:
            str: The species endpoint URL.
        """
        if isinstance(id_or_url, str) and id_or_url.startswith("http"):
            id_or_url = id_from_url(id_or_url)
        return f"{self.config.api_base_url}/pokemon-species/{id_or_url}/"

    async def open_detail(self, id_or_url: Union[int, str]) -> Optional[str]:
        """Fetch a Pokemon and its species, then mount the detail overlay.

        The species is requested by ID alongside the Pokemon. If that misses,
        the species link carried by the Pokemon record is tried once before
        rendering with placeholder text.

        Args:
            id_or_url (Union[int, str]): ID, name or full detail URL (e.g. a card's `data-url`).

        Returns:
            Optional[str]: The overlay markup, or None if the Pokemon could not be fetched.
        """
        species_url = self.species_url(id_or_url)
        pokemon, species = await asyncio.gather(
            self.client.fetch_item_detail(id_or_url),
            self.client.fetch_resource(species_url, PokemonSpecies),
        )

        if pokemon is None:
            logger.warning(f"Could not open detail for '{id_or_url}'")
            return None

        # Alternate forms (IDs above 10000) share their base form's species
        if species is None and pokemon.species is not None and pokemon.species.url:
            linked_url = pokemon.species.url.rstrip("/") + "/"
            if linked_url != species_url:
                species = await self.client.fetch_resource(linked_url, PokemonSpecies)

        if species is None:
            logger.info(f"No species data for '{id_or_url}', rendering without it")
            species = PokemonSpecies()

        self.current_detail = pokemon
        markup = render_detail_overlay(pokemon, species, self.config)

        modal_root = self.document.modal_root
        if modal_root is not None:
            set_inner_html(modal_root, markup)

        return markup

    def close_detail(self) -> None:
        """Remove the overlay and discard the detail record."""
        modal_root = self.document.modal_root
        if modal_root is not None:
            modal_root.clear()
        self.current_detail = None

    def to_html(self) -> str:
        """Serialize the document.

        Returns:
            str: The page HTML.
        """
        return self.document.to_html()
