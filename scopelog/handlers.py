"""Leveled loggers that ContextualLogger delegates to.

The default implementation is built on structlog: a filtering bound logger
for the level threshold, a PrintLogger for output, and a processor chain that
renders one JSON object per line.
"""

import sys
from collections.abc import Sequence
from typing import IO, Protocol, runtime_checkable

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from scopelog.attributes import Attribute
from scopelog.config.models.logging import LogFormat, LoggingConfig
from scopelog.context import Context
from scopelog.levels import Level

# Bound-context key carrying the record attributes until they are applied
ATTRIBUTES_KEY = "__scopelog_attributes__"

# Keys rendered ahead of the record's attributes
RECORD_HEAD_KEYS: tuple[str, ...] = ("time", "level", "msg")

# structlog method names -> rendered level labels
_LEVEL_LABELS: dict[str, str] = {
    "debug": Level.DEBUG.name,
    "info": Level.INFO.name,
    "warning": Level.WARN.name,
    "error": Level.ERROR.name,
}


@runtime_checkable
class LeveledLogger(Protocol):
    """Interface of the logger that formats and writes records."""

    def log_attrs(
        self,
        ctx: Context,
        level: Level,
        message: str,
        attributes: Sequence[Attribute],
    ) -> None:
        """Emit one record made of level, message and ordered attributes."""
        ...


def add_level_label(
    _logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Set ``level`` to the upper-case label of the record's level."""
    event_dict["level"] = _LEVEL_LABELS.get(method_name, method_name.upper())
    return event_dict


def apply_attributes(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Lay the record out as time, level, msg, then the attributes in order.

    Attributes are written after the header, so an attribute named ``level``,
    ``msg`` or ``time`` replaces the header value, and a repeated key keeps
    its first position with its last value.
    """
    attributes = event_dict.pop(ATTRIBUTES_KEY, ())
    record = {key: event_dict.pop(key) for key in RECORD_HEAD_KEYS if key in event_dict}
    record.update(event_dict)
    record.update(attributes)
    return record


def build_processors(format: LogFormat = "json", timestamp: bool = True) -> list[Processor]:
    """Build the processor chain for the default logger.

    Args:
        format: "json" for one JSON object per line, "console" for
            human-readable development output
        timestamp: Whether to stamp records with an ISO-8601 UTC ``time`` key

    Returns:
        Processor list ending in a renderer
    """
    processors: list[Processor] = [add_level_label]
    if timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True, key="time"))
    processors.append(structlog.processors.EventRenamer("msg"))
    processors.append(apply_attributes)

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                event_key="msg",
                timestamp_key="time",
            )
        )
    return processors


class StructlogLeveledLogger:
    """LeveledLogger backed by structlog.

    Does not touch structlog's global configuration; every instance carries
    its own processors and output, so it can live next to an application's
    own ``structlog.configure`` call.
    """

    def __init__(
        self,
        file: IO[str] | None = None,
        level: Level | int | str = Level.INFO,
        format: LogFormat = "json",
        timestamp: bool = True,
    ) -> None:
        """Create a logger writing to ``file``.

        Args:
            file: Text stream to write records to, stdout when omitted
            level: Minimum level emitted; lower records are dropped
            format: "json" or "console"
            timestamp: Whether records carry a ``time`` key
        """
        self.level = Level.parse(level)
        self.format = format
        self._output = structlog.PrintLogger(file=file)
        self._processors = build_processors(format=format, timestamp=timestamp)
        self._wrapper_class = structlog.make_filtering_bound_logger(int(self.level))

    @classmethod
    def from_config(
        cls, config: LoggingConfig, file: IO[str] | None = None
    ) -> "StructlogLeveledLogger":
        """Create a logger from a LoggingConfig section.

        Args:
            config: Logging configuration
            file: Explicit stream; overrides ``config.stream`` when given
        """
        if file is None:
            file = sys.stderr if config.stream == "stderr" else sys.stdout
        return cls(
            file=file,
            level=config.level,
            format=config.format,
            timestamp=config.timestamp,
        )

    def enabled(self, level: Level | int | str) -> bool:
        """Return whether records at ``level`` pass the threshold."""
        return Level.parse(level) >= self.level

    def log_attrs(
        self,
        ctx: Context,  # noqa: ARG002
        level: Level,
        message: str,
        attributes: Sequence[Attribute],
    ) -> None:
        """Render and write one record."""
        logger = self._wrapper_class(
            self._output,
            processors=self._processors,
            context={ATTRIBUTES_KEY: list(attributes)},
        )
        logger.log(int(level), message)

    def __repr__(self) -> str:
        return f"StructlogLeveledLogger(level={self.level.name}, format={self.format!r})"
