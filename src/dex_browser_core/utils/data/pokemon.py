"""
Utility functions for Pokemon data lookups.

Includes functions to resolve a grid entry's identity and sprite, pick
localized species text and scale base stats for display.
"""

from typing import Optional, Sequence, TypeVar, Union

from dex_browser_core.utils.data.constants import (
    DEFAULT_GENUS,
    DEFAULT_LANGUAGE,
    MAX_BASE_STAT,
    NO_DESCRIPTION,
    SPRITE_FALLBACK_URL,
    STAT_ABBREVIATIONS,
)
from dex_browser_core.utils.data.models import (
    FlavorTextEntry,
    Genus,
    GridEntry,
    ListingEntry,
    Pokemon,
    PokemonSpecies,
)
from dex_browser_core.utils.text.text_util import clean_flavor_text, id_from_url

T = TypeVar("T", FlavorTextEntry, Genus)


def get_entry_id(entry: GridEntry) -> Union[int, str]:
    """Get the identity of a grid entry.

    Detail records carry an explicit ID; listing entries are identified by the
    trailing segment of their URL.

    Args:
        entry (GridEntry): A listing entry or a detail record.

    Returns:
        Union[int, str]: The Pokemon's ID.
    """
    if isinstance(entry, Pokemon):
        return entry.id
    return id_from_url(entry.url)


def get_entry_types(entry: GridEntry) -> Optional[list[str]]:
    """Get the type names of a grid entry, or None if they are not known yet.

    Args:
        entry (GridEntry): A listing entry or a detail record.

    Returns:
        Optional[list[str]]: Type names in slot order, or None for listing entries.
    """
    if isinstance(entry, ListingEntry):
        return None
    return [t.type.name for t in entry.types]


def get_pokemon_sprite(
    entry: GridEntry,
    sprite_fallback_url: str = SPRITE_FALLBACK_URL,
) -> str:
    """Get the display image for a Pokemon.

    Resolution order: front sprite, official artwork, then a URL built from the
    Pokemon's ID on the sprite CDN. The last step always yields a URL, even if
    the image does not exist.

    Args:
        entry (GridEntry): A listing entry or a detail record.
        sprite_fallback_url (str, optional): Fallback URL template with an `{id}` placeholder.

    Returns:
        str: URL to the Pokemon sprite
    """
    if isinstance(entry, Pokemon):
        sprites = entry.sprites
        if sprites.front_default:
            return sprites.front_default

        artwork = sprites.other.official_artwork if sprites.other else None
        if artwork is not None and artwork.front_default:
            return artwork.front_default

    return sprite_fallback_url.format(id=get_entry_id(entry))


def find_localized(entries: Sequence[T], language: str = DEFAULT_LANGUAGE) -> Optional[T]:
    """Find the first entry written in the given language.

    Args:
        entries (Sequence[T]): Flavor text or genus entries.
        language (str, optional): Language code. Defaults to "en".

    Returns:
        Optional[T]: The first matching entry, or None.
    """
    return next((e for e in entries if e.language.name == language), None)


def get_flavor_text(species: PokemonSpecies, language: str = DEFAULT_LANGUAGE) -> str:
    """Get the species description in the given language.

    Args:
        species (PokemonSpecies): The species record.
        language (str, optional): Language code. Defaults to "en".

    Returns:
        str: The cleaned flavor text, or a placeholder if none is available.
    """
    entry = find_localized(species.flavor_text_entries, language)
    if entry is None:
        return NO_DESCRIPTION
    return clean_flavor_text(entry.flavor_text)


def get_genus(species: PokemonSpecies, language: str = DEFAULT_LANGUAGE) -> str:
    """Get the species genus (e.g., "Mouse Pokémon") in the given language.

    Args:
        species (PokemonSpecies): The species record.
        language (str, optional): Language code. Defaults to "en".

    Returns:
        str: The genus, or a generic label if none is available.
    """
    entry = find_localized(species.genera, language)
    return entry.genus if entry is not None and entry.genus else DEFAULT_GENUS


def get_stat_label(stat_name: str) -> str:
    """Get the short label for a stat (e.g., "special-attack" -> "SP.ATK").

    Args:
        stat_name (str): The API stat name.

    Returns:
        str: The abbreviation, or the uppercased name for unknown stats.
    """
    return STAT_ABBREVIATIONS.get(stat_name, stat_name.upper())


def calculate_stat_percentage(base_stat: int, max_value: int = MAX_BASE_STAT) -> float:
    """Scale a base stat to a bar width percentage, clipped at 100.

    Args:
        base_stat (int): The base stat value.
        max_value (int, optional): Value that maps to a full bar. Defaults to 255.

    Returns:
        float: Percentage in the range [0, 100].
    """
    return min(100, (base_stat / max_value) * 100)
