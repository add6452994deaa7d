"""
Text utility functions for ID formatting, URL parsing and display strings.

This module provides the small string helpers shared by the renderers and the
API client, including dex number padding, identity extraction from resource
URLs and unit formatting.
"""

from typing import Union

# Form feed characters show up in flavor text copied from the game cartridges
FLAVOR_TEXT_CONTROL_CHAR = "\f"


def format_id(pokemon_id: Union[int, str]) -> str:
    """Format a Pokemon ID as a zero-padded dex tag.

    IDs are left-padded to four characters but never truncated.

    Args:
        pokemon_id (Union[int, str]): The Pokemon's ID.

    Returns:
        str: The formatted tag.

    Example:
        >>> format_id(1)
        '#0001'
        >>> format_id(10000)
        '#10000'
    """
    return f"#{str(pokemon_id).rjust(4, '0')}"


def id_from_url(url: str) -> str:
    """Extract the identity of a resource from its URL.

    Args:
        url (str): A resource URL such as `https://pokeapi.co/api/v2/pokemon/25/`.

    Returns:
        str: The last non-empty path segment (`"25"`), or an empty string.
    """
    segments = [segment for segment in url.split("/") if segment]
    return segments[-1] if segments else ""


def format_display_name(name: str) -> str:
    """Format an API slug for display (e.g., "solar-power" -> "solar power").

    Capitalization is left to the stylesheet.

    Args:
        name (str): The API name.

    Returns:
        str: The name with hyphens replaced by spaces.
    """
    return name.replace("-", " ")


def clean_flavor_text(text: str) -> str:
    """Replace the form feed characters found in game flavor text with spaces.

    Args:
        text (str): Raw flavor text.

    Returns:
        str: The cleaned text.
    """
    return text.replace(FLAVOR_TEXT_CONTROL_CHAR, " ")


def format_number(value: float) -> str:
    """Format a number without a trailing `.0` (e.g., 1.0 -> "1", 0.7 -> "0.7").

    Args:
        value (float): The number to format.

    Returns:
        str: The compact representation.
    """
    return f"{value:g}"


def format_measurement(tenths: int, unit: str) -> str:
    """Convert a value the API reports in tenths of a unit into whole units.

    Args:
        tenths (int): The raw API value (decimetres or hectograms).
        unit (str): Unit suffix to append ("m" or "kg").

    Returns:
        str: The formatted measurement, e.g. `format_measurement(69, "kg")` -> "6.9kg".
    """
    return f"{format_number(tenths / 10)}{unit}"
