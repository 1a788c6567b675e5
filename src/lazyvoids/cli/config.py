"""CLI configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (LAZYVOIDS_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class LazyVoidsConfig(BaseSettings):
    """Configuration for the lazyvoids CLI.

    Environment variables are prefixed with LAZYVOIDS_.
    """

    model_config = SettingsConfigDict(
        env_prefix="LAZYVOIDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Seed for the random commands; unset means OS entropy
    random_seed: int | None = None

    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        upper = v.upper()
        if upper not in _LOG_LEVELS:
            msg = f"Invalid log level: {v}. Must be one of {set(_LOG_LEVELS)}"
            raise ValueError(msg)
        return upper

    @property
    def log_level_number(self) -> int:
        """Numeric level for structlog's filtering logger (DEBUG when debug is set)."""
        if self.debug:
            return _LOG_LEVELS["DEBUG"]
        return _LOG_LEVELS[self.log_level]


@lru_cache
def get_config() -> LazyVoidsConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        LazyVoidsConfig instance.
    """
    return LazyVoidsConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
