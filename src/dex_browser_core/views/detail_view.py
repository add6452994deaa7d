"""
Detail view: the overlay shown for a single Pokemon.
"""

from dex_browser_core.utils.core.config_registry import resolve_config
from dex_browser_core.utils.data.models import Pokemon, PokemonSpecies
from dex_browser_core.utils.data.pokemon import get_flavor_text, get_genus, get_pokemon_sprite
from dex_browser_core.utils.formatters.html_formatter import (
    format_ability,
    format_stat_row,
    format_type_badges,
)
from dex_browser_core.utils.text.text_util import format_id, format_measurement

CLOSE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<line x1="18" y1="6" x2="6" y2="18"></line><line x1="6" y1="6" x2="18" y2="18"></line></svg>'
)


def _generate_info_tile(label: str, value: str) -> str:
    return (
        '<div class="info-tile bg-black/30 p-3 rounded-lg text-center border border-border">'
        f'<div class="text-secondary text-xs uppercase font-bold mb-1">{label}</div>'
        f'<div class="font-mono font-bold">{value}</div>'
        "</div>"
    )


def _generate_stats_section(pokemon: Pokemon) -> str:
    stats_html = "".join(format_stat_row(s.stat.name, s.base_stat) for s in pokemon.stats)
    return (
        '<div class="mb-4">'
        '<h4 class="text-sm font-bold text-secondary uppercase mb-2">Base Stats</h4>'
        f"{stats_html}"
        "</div>"
    )


def _generate_abilities_section(pokemon: Pokemon) -> str:
    abilities_html = "".join(
        format_ability(a.ability.name, a.is_hidden) for a in pokemon.abilities
    )
    return (
        "<div>"
        '<h4 class="text-sm font-bold text-secondary uppercase mb-1">Abilities</h4>'
        f'<div class="flex gap-2 flex-wrap">{abilities_html}</div>'
        "</div>"
    )


def render_detail_overlay(pokemon: Pokemon, species: PokemonSpecies, config=None) -> str:
    """Render the detail overlay for a Pokemon.

    Both records are required; fetching them (and deciding what to do when a
    fetch fails) is the caller's job.

    Args:
        pokemon (Pokemon): The detail record.
        species (PokemonSpecies): The matching species record.
        config: BrowserConfig instance. If None, uses the global config or defaults.

    Returns:
        str: HTML for the overlay.
    """
    config = resolve_config(config)

    flavor_text = get_flavor_text(species, config.language)
    genus = get_genus(species, config.language)
    image_url = get_pokemon_sprite(pokemon, config.sprite_fallback_url)

    return (
        '<div class="fixed inset-0 z-50 flex items-center justify-center p-4 bg-black/80 backdrop-blur-sm" id="modal-backdrop">'
        '<div class="bg-surface border border-accent rounded-2xl w-full max-w-2xl max-h-[90vh] overflow-y-auto shadow-2xl relative" id="modal-content">'
        f'<button class="absolute top-4 right-4 text-secondary hover:text-white z-10 p-2" id="close-modal">{CLOSE_ICON}</button>'
        '<div class="grid grid-cols-1 md:grid-cols-2 gap-6 p-6 md:p-8">'
        # Left column: artwork and types
        '<div class="flex flex-col items-center justify-center relative">'
        f'<div class="font-mono text-secondary/30 text-6xl md:text-8xl font-bold absolute top-0 opacity-20 select-none">{format_id(pokemon.id)}</div>'
        f'<img src="{image_url}" alt="{pokemon.name}" class="pokemon-art w-48 h-48 md:w-64 md:h-64 object-contain z-10">'
        f'<div class="flex gap-2 mt-4 flex-wrap justify-center">{format_type_badges(t.type.name for t in pokemon.types)}</div>'
        "</div>"
        # Right column: text, measurements, stats and abilities
        '<div class="flex flex-col">'
        f'<h2 class="text-3xl font-bold capitalize mb-1">{pokemon.name}</h2>'
        f'<p class="genus text-secondary font-mono text-sm mb-4">{genus}</p>'
        f'<p class="flavor-text text-gray-300 text-sm mb-6 leading-relaxed">{flavor_text}</p>'
        '<div class="grid grid-cols-2 gap-4 mb-6">'
        f'{_generate_info_tile("Height", format_measurement(pokemon.height, "m"))}'
        f'{_generate_info_tile("Weight", format_measurement(pokemon.weight, "kg"))}'
        "</div>"
        f"{_generate_stats_section(pokemon)}"
        f"{_generate_abilities_section(pokemon)}"
        "</div>"
        "</div>"
        "</div>"
        "</div>"
    )
