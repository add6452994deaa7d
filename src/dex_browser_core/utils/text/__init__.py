"""Text processing utilities."""

from .text_util import (
    clean_flavor_text,
    format_display_name,
    format_id,
    format_measurement,
    format_number,
    id_from_url,
)

__all__ = [
    "format_id",
    "id_from_url",
    "format_display_name",
    "clean_flavor_text",
    "format_number",
    "format_measurement",
]
