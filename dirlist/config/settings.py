"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from dirlist.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_TIME_FORMAT = "%Y %b %d %H:%M"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("DIRLIST_LOG_LEVEL", "WARNING")
        self.default_width: int = self._get_positive_int("DIRLIST_WIDTH", 80)
        self.time_format: str = self._get_env("DIRLIST_TIME_FORMAT", DEFAULT_TIME_FORMAT)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a known level."""
        value = self._get_env(key, default).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Environment variable {key} is not a log level: {value}")
        return value

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer: {raw}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive: {raw}")
        return value


# Global settings instance
settings = Settings()
