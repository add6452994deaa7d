"""
Output formatting utilities.

Import patterns:
- Package-level imports for commonly used formatters:
  from dex_browser_core.utils.formatters import format_type_badge, format_stat_bar
"""

from .html_formatter import (
    format_ability,
    format_pokemon_card,
    format_pokemon_card_grid,
    format_stat_bar,
    format_stat_row,
    format_type_badge,
    format_type_badges,
    format_type_filter,
)

__all__ = [
    "format_ability",
    "format_pokemon_card",
    "format_pokemon_card_grid",
    "format_stat_bar",
    "format_stat_row",
    "format_type_badge",
    "format_type_badges",
    "format_type_filter",
]
