from __future__ import annotations

import os
from typing import Final

from .logger import log


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class Config:
    """Text Fusion configuration with environment variable support and validation."""

    # Default values
    _DEFAULT_STATUS_HEIGHT: Final[int] = 3
    _DEFAULT_PANE_SPACING: Final[int] = 2
    _DEFAULT_THEME: Final[str] = "fusion-dark"
    _DEFAULT_PLACEHOLDER: Final[str] = "Enter text here..."

    # Validation bounds
    _MIN_STATUS_HEIGHT: Final[int] = 1
    _MAX_STATUS_HEIGHT: Final[int] = 20
    _MIN_PANE_SPACING: Final[int] = 0
    _MAX_PANE_SPACING: Final[int] = 10

    def __init__(self):
        """Initialize configuration with environment variable overrides."""
        self.status_height = self._get_int_env("FUSION_STATUS_HEIGHT", self._DEFAULT_STATUS_HEIGHT)
        self.pane_spacing = self._get_int_env("FUSION_PANE_SPACING", self._DEFAULT_PANE_SPACING)
        self.theme = self._get_str_env("FUSION_THEME", self._DEFAULT_THEME)
        self.placeholder = self._get_str_env("FUSION_PLACEHOLDER", self._DEFAULT_PLACEHOLDER)

        self._validate_all()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError as e:
            log.warning(f"[CONFIG] Invalid integer value for {key}='{value}', using default {default}: {e}")
            return default

    def _get_str_env(self, key: str, default: str) -> str:
        value = os.environ.get(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def _validate_all(self) -> None:
        """Validate all configuration values."""
        self._validate_int("status_height", self.status_height, self._MIN_STATUS_HEIGHT, self._MAX_STATUS_HEIGHT)
        self._validate_int("pane_spacing", self.pane_spacing, self._MIN_PANE_SPACING, self._MAX_PANE_SPACING)
        self._validate_str("theme", self.theme)
        self._validate_str("placeholder", self.placeholder)

    def _validate_int(self, name: str, value: int, min_val: int, max_val: int) -> None:
        """Validate integer configuration value."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def _validate_str(self, name: str, value: str) -> None:
        if not isinstance(value, str):
            raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
        if not value:
            raise ConfigError(f"{name} must not be empty")

    def __repr__(self) -> str:
        """String representation of configuration."""
        return (
            f"Config(status_height={self.status_height}, "
            f"pane_spacing={self.pane_spacing}, "
            f"theme={self.theme!r}, "
            f"placeholder={self.placeholder!r})"
        )


# Global configuration instance
config = Config()
