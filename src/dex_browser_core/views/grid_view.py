"""
Grid view: paints Pokemon cards into a container.
"""

from typing import Sequence

from bs4 import Tag

from dex_browser_core.utils.core.config_registry import resolve_config
from dex_browser_core.utils.core.document import set_inner_html
from dex_browser_core.utils.core.logger import get_logger
from dex_browser_core.utils.data.models import GridEntry
from dex_browser_core.utils.formatters.html_formatter import format_pokemon_card_grid

logger = get_logger(__name__)


def render_grid(entries: Sequence[GridEntry], container: Tag, config=None) -> str:
    """Render entries as cards and overwrite the container's contents in one pass.

    Entries that already carry type data get their badges immediately; the rest
    get an empty `types-{id}` placeholder for the hydrator.

    Args:
        entries (Sequence[GridEntry]): Listing entries or detail records, in display order.
        container (Tag): Element that receives the cards.
        config: BrowserConfig instance. If None, uses the global config or defaults.

    Returns:
        str: The markup written into the container.
    """
    config = resolve_config(config)

    markup = format_pokemon_card_grid(
        entries,
        sprite_fallback_url=config.sprite_fallback_url,
        api_base_url=config.api_base_url,
    )
    set_inner_html(container, markup)

    logger.debug(f"Rendered {len(entries)} cards into #{container.get('id', '?')}")
    return markup
