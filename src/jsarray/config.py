"""Library configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (JSARRAY_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(value: str) -> str:
    """Upper-case a level name, rejecting anything outside LOG_LEVELS."""
    upper = value.upper()
    if upper not in LOG_LEVELS:
        msg = f"Invalid log level: {value}. Must be one of {LOG_LEVELS}"
        raise ValueError(msg)
    return upper


class JsArrayConfig(BaseSettings):
    """Configuration for jsarray.

    Environment variables are prefixed with JSARRAY_. Settings only affect
    logging setup; array operations never read them.
    """

    model_config = SettingsConfigDict(
        env_prefix="JSARRAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        return normalize_log_level(v)


@lru_cache
def get_config() -> JsArrayConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        JsArrayConfig instance.
    """
    return JsArrayConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
