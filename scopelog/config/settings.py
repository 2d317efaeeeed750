"""Root settings model for scopelog configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from scopelog.config.models.logging import LoggingConfig
from scopelog.exceptions import ConfigurationError


def config_files() -> tuple[Path, Path]:
    """Locate the base and environment TOML files.

    The directory is SCOPELOG_CONFIG_DIR, or ``config/`` under the working
    directory; the environment file is named after SCOPELOG_ENV
    (default "development"). Either file may be absent.

    Raises:
        ConfigurationError: If SCOPELOG_CONFIG_DIR names a missing directory
    """
    config_dir = Path(os.environ.get("SCOPELOG_CONFIG_DIR") or "config")
    if "SCOPELOG_CONFIG_DIR" in os.environ and not config_dir.is_dir():
        raise ConfigurationError(f"Config directory not found: {config_dir}")
    env = os.environ.get("SCOPELOG_ENV", "development")
    return config_dir / "default.toml", config_dir / f"{env}.toml"


class Settings(BaseSettings):
    """Root configuration object.

    Sources, highest priority first: constructor arguments, SCOPELOG_*
    environment variables, config/{SCOPELOG_ENV}.toml, config/default.toml,
    model defaults. Nested tables are merged across sources.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCOPELOG_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        default_file, env_file = config_files()
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=env_file),
            TomlConfigSettingsSource(settings_cls, toml_file=default_file),
        )
