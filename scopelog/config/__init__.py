"""Configuration for scopelog, read once per process.

    from scopelog.config import get_settings

    keys = get_settings().logging.context_keys
"""

import tomllib
from functools import lru_cache

from scopelog.config.settings import Settings
from scopelog.exceptions import ConfigurationError


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache the process settings.

    Call ``get_settings.cache_clear()`` to pick up changed files or env vars.

    Raises:
        ConfigurationError: If a config file is not valid TOML
    """
    try:
        return Settings()
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML configuration: {exc}") from exc


__all__ = ["Settings", "get_settings"]
