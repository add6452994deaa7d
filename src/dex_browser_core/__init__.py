"""Dex Browser Core - PokeAPI catalog browser: fetching, grid and detail rendering."""

__version__ = "1.0.0"

from .browser import CatalogBrowser
from .config import BrowserConfig
from .utils.core.client import PokeAPIClient

__all__ = ["BrowserConfig", "CatalogBrowser", "PokeAPIClient"]
