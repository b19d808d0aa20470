"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from custom_terminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

THEMES = ("classic", "dark", "light")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = self._get_directory(
            "TERMINAL_START_DIR", os.getcwd()
        )
        self.log_level: str = self._get_log_level("TERMINAL_LOG_LEVEL", "WARNING")
        self.ui_theme: str = self._get_choice("TERMINAL_UI_THEME", "classic", THEMES)
        self.font_size: int = self._get_positive_int("TERMINAL_FONT_SIZE", 16)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def _get_directory(self, key: str, default: str) -> str:
        """Get a directory path, raise error if it is not an existing directory."""
        value = os.path.abspath(os.path.expanduser(self._get_env(key, default)))
        if not os.path.isdir(value):
            raise ConfigurationError(f"{key} is not an existing directory: {value}")
        return value

    def _get_log_level(self, key: str, default: str) -> str:
        value = self._get_env(key, default).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"{key} is not a valid log level: {value}")
        return value

    def _get_choice(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        value = self._get_env(key, default).lower()
        if value not in choices:
            raise ConfigurationError(
                f"{key} must be one of {', '.join(choices)}, got: {value}"
            )
        return value

    def _get_positive_int(self, key: str, default: int) -> int:
        raw = self._get_env(key, str(default))
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got: {raw}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got: {value}")
        return value


# Global settings instance
settings = Settings()
