"""Logging configuration models."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from scopelog.levels import Level

LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]
LogFormat = Literal["json", "console"]
LogStream = Literal["stdout", "stderr"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Minimum level emitted")
    format: LogFormat = Field(default="json", description="Output format")
    stream: LogStream = Field(default="stdout", description="Standard stream records go to")
    timestamp: bool = Field(default=True, description="Stamp records with a UTC time key")
    context_keys: list[str] = Field(
        default_factory=list,
        description="Context keys copied onto every record, in output order",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        """Accept level names in any case and numeric levels."""
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            return Level.parse(value).name
        return value
