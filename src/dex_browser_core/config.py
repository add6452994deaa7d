"""
Configuration class for the catalog browser.

This module provides the BrowserConfig dataclass shared by the API client,
the renderers and the logging system. Applications create one instance (in
code or from a YAML file) and pass it to components or register it globally
with set_config().
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

import yaml

from dex_browser_core.utils.data.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_PAGE_SIZE,
    POKEAPI_BASE_URL,
    SPRITE_FALLBACK_URL,
)


@dataclass
class BrowserConfig:
    """
    Configuration for the catalog browser.

    Every field has a default pointing at the public PokeAPI, so `BrowserConfig()`
    is a working configuration.

    Example:
        config = BrowserConfig(
            page_size=50,
            logging_level="DEBUG",
        )
    """

    # ============================================================================
    # API Configuration
    # ============================================================================

    api_base_url: str = POKEAPI_BASE_URL
    sprite_fallback_url: str = SPRITE_FALLBACK_URL
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = 10.0
    user_agent: str = ""  # Will be set in __post_init__ if empty

    # ============================================================================
    # Display Configuration
    # ============================================================================

    language: str = DEFAULT_LANGUAGE

    # ============================================================================
    # Logging Configuration
    # ============================================================================

    logging_level: str = "INFO"
    logging_format: str = "text"
    logging_log_dir: str = "logs"
    logging_to_file: bool = False
    logging_max_log_size_mb: int = 10
    logging_backup_count: int = 5
    logging_console_colors: bool = True

    def __post_init__(self):
        """Set derived defaults and validate configuration.

        Raises:
            ValueError: If configuration validation fails
            TypeError: If configuration types are incorrect
        """
        self._validate_required_fields()

        # Strip trailing slashes so endpoint paths can be joined with "/"
        self.api_base_url = self.api_base_url.rstrip("/")

        if not self.user_agent:
            # Import version to keep User-Agent in sync with package version
            from dex_browser_core import __version__

            self.user_agent = f"dex-browser-core/{__version__}"

        self._validate_configuration()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "BrowserConfig":
        """Load a configuration from a YAML file.

        Keys map one-to-one onto field names; missing keys keep their defaults.

        Args:
            path (Union[str, Path]): Path to the YAML file.

        Raises:
            ValueError: If the file does not hold a mapping or has unknown keys.

        Returns:
            BrowserConfig: The loaded configuration.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        return cls(**data)

    def _validate_required_fields(self) -> None:
        """Validate that required fields are populated.

        Raises:
            ValueError: If required fields are missing or invalid
            TypeError: If field types are incorrect
        """
        if not isinstance(self.api_base_url, str):
            raise TypeError(
                f"api_base_url must be a string, got {type(self.api_base_url).__name__}"
            )

        if not self.api_base_url.strip():
            raise ValueError("api_base_url cannot be empty")

        if not self.sprite_fallback_url or "{id}" not in self.sprite_fallback_url:
            raise ValueError("sprite_fallback_url must contain an '{id}' placeholder")

        if not self.language or not self.language.strip():
            raise ValueError("language cannot be empty")

    def _validate_configuration(self) -> None:
        """Validate configuration values and ranges.

        Raises:
            ValueError: If configuration values are invalid
        """
        # Validate URL format
        if not self.api_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"api_base_url must start with http:// or https://, got '{self.api_base_url}'"
            )

        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise TypeError(f"page_size must be an int, got {type(self.page_size).__name__}")

        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

        # Validate logging configuration
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level.upper() not in valid_log_levels:
            raise ValueError(
                f"logging_level must be one of {valid_log_levels}, got '{self.logging_level}'"
            )

        valid_log_formats = ["text", "json"]
        if self.logging_format not in valid_log_formats:
            raise ValueError(
                f"logging_format must be one of {valid_log_formats}, got '{self.logging_format}'"
            )

        if self.logging_max_log_size_mb <= 0:
            raise ValueError(
                f"logging_max_log_size_mb must be positive, got {self.logging_max_log_size_mb}"
            )

        if self.logging_backup_count < 0:
            raise ValueError(
                f"logging_backup_count must be non-negative, got {self.logging_backup_count}"
            )
