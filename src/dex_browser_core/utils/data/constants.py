"""
Shared constants for Pokemon-related data and formatting.

This module centralizes the static lookup tables used by the renderers so that
badge colors, stat labels and fallback strings are defined once and imported
where needed.
"""

# ============================================================================
# Type-Related Constants
# ============================================================================

TYPE_COLORS: dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

DEFAULT_TYPE_COLOR = "#777"

# ============================================================================
# Stat-Related Constants
# ============================================================================

STAT_ABBREVIATIONS: dict[str, str] = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special-attack": "SP.ATK",
    "special-defense": "SP.DEF",
    "speed": "SPD",
}

# Approximate ceiling for base stats; a few Pokemon exceed it and clip at 100%.
MAX_BASE_STAT = 255

# ============================================================================
# Display Fallbacks
# ============================================================================

DEFAULT_LANGUAGE = "en"
NO_DESCRIPTION = "No description available."
DEFAULT_GENUS = "Pokémon"

# ============================================================================
# Remote Endpoints
# ============================================================================

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
SPRITE_FALLBACK_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/pokemon/{id}.png"
DEFAULT_PAGE_SIZE = 150
