"""Pokemon-specific domain utilities."""

from .constants import (
    DEFAULT_TYPE_COLOR,
    MAX_BASE_STAT,
    STAT_ABBREVIATIONS,
    TYPE_COLORS,
)
from .models import (
    GridEntry,
    ListingEntry,
    NamedResource,
    Pokemon,
    PokemonSpecies,
)
from .pokemon import (
    calculate_stat_percentage,
    get_entry_id,
    get_entry_types,
    get_flavor_text,
    get_genus,
    get_pokemon_sprite,
    get_stat_label,
)

__all__ = [
    # Constants
    "TYPE_COLORS",
    "DEFAULT_TYPE_COLOR",
    "STAT_ABBREVIATIONS",
    "MAX_BASE_STAT",
    # Pokemon lookups
    "calculate_stat_percentage",
    "get_entry_id",
    "get_entry_types",
    "get_flavor_text",
    "get_genus",
    "get_pokemon_sprite",
    "get_stat_label",
    # Models
    "GridEntry",
    "ListingEntry",
    "NamedResource",
    "Pokemon",
    "PokemonSpecies",
]
