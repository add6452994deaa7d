"""
Hydrator: fills in type badges for cards painted from listing data only.
"""

from typing import Sequence

from dex_browser_core.utils.core.client import PokeAPIClient
from dex_browser_core.utils.core.document import Document, has_element_children, set_inner_html
from dex_browser_core.utils.core.logger import get_logger
from dex_browser_core.utils.data.models import GridEntry, ListingEntry
from dex_browser_core.utils.data.pokemon import get_entry_id
from dex_browser_core.utils.formatters.html_formatter import format_type_badges

logger = get_logger(__name__)


async def hydrate_types(
    entries: Sequence[GridEntry],
    document: Document,
    client: PokeAPIClient,
) -> int:
    """Fetch details for listing-only entries and patch their type badges in place.

    Entries are processed strictly one at a time, each fetch awaited before the
    next starts. An entry is skipped when it already has type data, when its
    `types-{id}` container is not in the document (e.g. the grid was re-rendered)
    or when the container already has children. Failed fetches leave the
    container empty.

    Args:
        entries (Sequence[GridEntry]): The entries that were rendered into the grid.
        document (Document): The document holding the grid.
        client (PokeAPIClient): Client used to fetch detail records.

    Returns:
        int: Number of containers that received badges.
    """
    hydrated = 0

    for entry in entries:
        if not isinstance(entry, ListingEntry):
            continue

        element = document.get_element_by_id(f"types-{get_entry_id(entry)}")
        if element is None or has_element_children(element):
            continue

        details = await client.fetch_item_detail(entry.url)
        if details is None or not details.types:
            continue

        set_inner_html(element, format_type_badges(t.type.name for t in details.types))
        hydrated += 1

    logger.debug(f"Hydrated types for {hydrated} of {len(entries)} entries")
    return hydrated
