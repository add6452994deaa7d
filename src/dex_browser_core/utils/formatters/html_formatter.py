"""
Utility functions for generating HTML fragments.

This module provides helpers for creating consistent markup elements like type
badges, stat bars and Pokemon cards. All functions are pure: they take data
and return strings.
"""

from typing import Iterable, Optional, Sequence

from dex_browser_core.utils.data.constants import (
    DEFAULT_TYPE_COLOR,
    MAX_BASE_STAT,
    POKEAPI_BASE_URL,
    SPRITE_FALLBACK_URL,
    TYPE_COLORS,
)
from dex_browser_core.utils.data.models import GridEntry, ListingEntry, NamedResource
from dex_browser_core.utils.data.pokemon import (
    calculate_stat_percentage,
    get_entry_id,
    get_entry_types,
    get_pokemon_sprite,
    get_stat_label,
)
from dex_browser_core.utils.text.text_util import format_display_name, format_id, format_number


def format_type_badge(type_name: str) -> str:
    """Format a Pokemon type name as a colored badge using an HTML span element.

    Args:
        type_name (str): The type name to format (e.g., "fire", "water", "grass")

    Returns:
        str: HTML span element with styled badge

    Example:
        >>> format_type_badge("fire")
        '<span class="type-badge ..." style="background-color: #EE8130; ...">fire</span>'
    """
    type_color = TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)

    return (
        '<span class="type-badge inline-block px-2 py-0.5 rounded text-xs font-bold text-white capitalize shadow-sm" '
        f'style="background-color: {type_color}; text-shadow: 0 1px 2px rgba(0,0,0,0.3);">'
        f"{type_name}</span>"
    )


def format_type_badges(type_names: Iterable[str]) -> str:
    """Format several type names as consecutive badges.

    Args:
        type_names (Iterable[str]): Type names in slot order.

    Returns:
        str: Concatenated badge markup.
    """
    return "".join(format_type_badge(name) for name in type_names)


def format_stat_bar(value: int, max_value: int = MAX_BASE_STAT) -> str:
    """Create a visual progress bar for a stat.

    Args:
        value (int): The stat value to represent
        max_value (int, optional): The value drawn as a full bar. Defaults to MAX_BASE_STAT.

    Returns:
        str: HTML representation of the progress bar.
    """
    percentage = format_number(calculate_stat_percentage(value, max_value))

    bar_html = '<div class="flex-1 h-1.5 bg-gray-800 rounded-full overflow-hidden">'
    bar_html += f'<div class="stat-fill h-full bg-accent" style="width: {percentage}%"></div>'
    bar_html += "</div>"
    return bar_html


def format_stat_row(stat_name: str, value: int) -> str:
    """Create a labeled stat row: abbreviation, value and bar.

    Args:
        stat_name (str): The API stat name (e.g., "special-attack").
        value (int): The base stat value.

    Returns:
        str: HTML for the stat row.
    """
    label = get_stat_label(stat_name)

    return (
        '<div class="stat-row flex items-center text-sm mb-1">'
        f'<span class="stat-label w-16 font-mono text-secondary font-bold text-xs">{label}</span>'
        f'<span class="stat-value w-8 font-mono font-bold text-right mr-2">{value}</span>'
        f"{format_stat_bar(value)}"
        "</div>"
    )


def format_ability(ability_name: str, is_hidden: bool = False) -> str:
    """Format an ability as a chip, marking hidden abilities.

    Args:
        ability_name (str): The API ability name (e.g., "solar-power").
        is_hidden (bool, optional): Whether this is the Pokemon's hidden ability. Defaults to False.

    Returns:
        str: HTML span for the ability.

    Example:
        >>> format_ability("solar-power", True)
        '<span class="ability ...">solar power (Hidden)</span>'
    """
    suffix = " (Hidden)" if is_hidden else ""

    return (
        '<span class="ability text-xs bg-black/50 px-2 py-1 rounded border border-border text-gray-300 capitalize">'
        f"{format_display_name(ability_name)}{suffix}</span>"
    )


def format_pokemon_card(
    entry: GridEntry,
    sprite_fallback_url: str = SPRITE_FALLBACK_URL,
    api_base_url: str = POKEAPI_BASE_URL,
) -> str:
    """Format a single grid card.

    Cards for entries without type data get an empty `types-{id}` container that
    the hydrator fills in later.

    Args:
        entry (GridEntry): A listing entry or a detail record.
        sprite_fallback_url (str, optional): Sprite URL template used when the entry has no sprite.
        api_base_url (str, optional): API root used to build `data-url` for detail records.

    Returns:
        str: HTML for the card.
    """
    pokemon_id = get_entry_id(entry)
    image_url = get_pokemon_sprite(entry, sprite_fallback_url)

    type_names = get_entry_types(entry)
    types_html = format_type_badges(type_names) if type_names else ""

    if isinstance(entry, ListingEntry):
        data_url = entry.url
    else:
        data_url = f"{api_base_url}/pokemon/{pokemon_id}/"

    return (
        '<div class="pokemon-card group relative bg-surface border border-border rounded-xl p-4 cursor-pointer" '
        f'data-url="{data_url}" data-id="{pokemon_id}">'
        f'<div class="absolute top-2 right-3 font-mono text-secondary font-bold text-sm">{format_id(pokemon_id)}</div>'
        '<div class="aspect-square mb-2 flex items-center justify-center">'
        f'<img src="{image_url}" alt="{entry.name}" loading="lazy" class="pokemon-art w-full h-full object-contain">'
        "</div>"
        f'<h3 class="text-center font-bold text-lg capitalize mb-1">{entry.name}</h3>'
        f'<div class="flex justify-center gap-1 flex-wrap mt-2" id="types-{pokemon_id}">{types_html}</div>'
        "</div>"
    )


def format_pokemon_card_grid(
    entries: Sequence[GridEntry],
    sprite_fallback_url: str = SPRITE_FALLBACK_URL,
    api_base_url: str = POKEAPI_BASE_URL,
) -> str:
    """Format a list of entries into concatenated grid cards, preserving order.

    Args:
        entries (Sequence[GridEntry]): Listing entries or detail records.
        sprite_fallback_url (str, optional): Sprite URL template for entries without sprites.
        api_base_url (str, optional): API root used to build `data-url` for detail records.

    Returns:
        str: The card markup.
    """
    return "".join(
        format_pokemon_card(entry, sprite_fallback_url, api_base_url) for entry in entries
    )


def format_type_filter(types: Sequence[NamedResource], selected: Optional[str] = None) -> str:
    """Format the options of the type filter control.

    Args:
        types (Sequence[NamedResource]): Type references from the API.
        selected (Optional[str], optional): Type name to preselect. Defaults to None (all types).

    Returns:
        str: HTML option elements, starting with an "All types" option.
    """
    options = ['<option value="">All types</option>']
    for t in types:
        selected_attr = " selected" if t.name == selected else ""
        options.append(f'<option value="{t.name}"{selected_attr}>{t.name}</option>')
    return "".join(options)
