"""Core infrastructure utilities."""

from .client import PokeAPIClient
from .config_registry import clear_config, get_config, has_config, resolve_config, set_config
from .document import Document, has_element_children, set_inner_html
from .logger import LogContext, configure_logging_system, get_logger

__all__ = [
    "get_logger",
    "configure_logging_system",
    "LogContext",
    "set_config",
    "get_config",
    "has_config",
    "clear_config",
    "resolve_config",
    "PokeAPIClient",
    "Document",
    "set_inner_html",
    "has_element_children",
]
