"""
Global config registry for dex_browser_core.

This module provides a thread-safe registry for storing and accessing the
BrowserConfig instance globally, so components constructed without an explicit
config share the application's settings.
"""

import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from dex_browser_core.config import BrowserConfig

_config: Optional["BrowserConfig"] = None
_lock = threading.Lock()


def set_config(config: "BrowserConfig") -> None:
    """Set the global BrowserConfig instance.

    Args:
        config: BrowserConfig instance to use globally

    Example:
        >>> from dex_browser_core.config import BrowserConfig
        >>> from dex_browser_core.utils.core.config_registry import set_config
        >>> set_config(BrowserConfig(page_size=50))
    """
    global _config
    with _lock:
        _config = config


def get_config() -> "BrowserConfig":
    """Get the global BrowserConfig instance.

    Returns:
        BrowserConfig instance

    Raises:
        RuntimeError: If config has not been set
    """
    with _lock:
        if _config is None:
            raise RuntimeError(
                "Config has not been set. Call set_config() first or pass config explicitly."
            )
        return _config


def has_config() -> bool:
    """Check if a config has been set.

    Returns:
        bool: True if config has been set, False otherwise
    """
    with _lock:
        return _config is not None


def clear_config() -> None:
    """Clear the global config (useful for testing)."""
    global _config
    with _lock:
        _config = None


def resolve_config(config: Optional["BrowserConfig"] = None) -> "BrowserConfig":
    """Pick the config a component should use.

    Order: the explicit argument, the globally registered config, then defaults.

    Args:
        config (Optional[BrowserConfig], optional): Explicit config. Defaults to None.

    Returns:
        BrowserConfig: The config to use.
    """
    if config is not None:
        return config

    with _lock:
        if _config is not None:
            return _config

    from dex_browser_core.config import BrowserConfig

    return BrowserConfig()
