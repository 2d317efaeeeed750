"""Configuration models for scopelog."""

from scopelog.config.models.logging import LogFormat, LoggingConfig, LogLevel, LogStream

__all__ = ["LogFormat", "LogLevel", "LogStream", "LoggingConfig"]
