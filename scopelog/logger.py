"""Contextual logger: injects declared request-context keys into every record.

A ContextualLogger is built once per application or subsystem from a list of
context keys and an underlying LeveledLogger. Each call reads those keys from
the context it is handed, prepends the ones present to the call's own
attributes and forwards the record.

    logger = build(["user_id", "request_id"])
    logger.info(ctx, "payment captured", ("amount", 1299))
"""

from collections.abc import Iterable
from typing import IO

from scopelog.attributes import Attribute, AttributeLike
from scopelog.config import Settings, get_settings
from scopelog.context import Context
from scopelog.handlers import LeveledLogger, StructlogLeveledLogger
from scopelog.levels import Level


class ContextualLogger:
    """Leveled logger that surfaces declared context keys on every record.

    Holds no mutable state: the key tuple is fixed at construction and each
    call builds its own attribute list, so one instance can be shared across
    threads as long as the underlying logger can.
    """

    __slots__ = ("_context_keys", "_underlying")

    def __init__(self, context_keys: Iterable[str], underlying: LeveledLogger) -> None:
        """Create a logger.

        Args:
            context_keys: Context keys to copy onto records, in output order
            underlying: Logger that renders and writes the records

        Raises:
            TypeError: If context_keys is a single string
        """
        if isinstance(context_keys, str):
            raise TypeError("context_keys must be an iterable of keys, not a str")
        self._context_keys: tuple[str, ...] = tuple(context_keys)
        self._underlying = underlying

    @property
    def context_keys(self) -> tuple[str, ...]:
        """Declared context keys, in output order."""
        return self._context_keys

    @property
    def underlying(self) -> LeveledLogger:
        """Logger records are delegated to."""
        return self._underlying

    def context_attributes(self, ctx: Context) -> list[Attribute]:
        """Resolve the declared keys present in ``ctx``.

        A key whose lookup returns None is left out.
        """
        attributes: list[Attribute] = []
        for key in self._context_keys:
            value = ctx.get(key)
            if value is not None:
                attributes.append(Attribute(key, value))
        return attributes

    def log(
        self,
        ctx: Context,
        level: Level | int | str,
        message: str,
        *attributes: AttributeLike,
    ) -> None:
        """Emit a record at ``level``.

        Context attributes come first, then ``attributes`` as given. Keys are
        not deduplicated.

        Raises:
            UnknownLevelError: If ``level`` is not a known level
        """
        level = Level.parse(level)
        merged = self.context_attributes(ctx)
        merged.extend(Attribute(*attribute) for attribute in attributes)
        self._underlying.log_attrs(ctx, level, message, merged)

    def debug(self, ctx: Context, message: str, *attributes: AttributeLike) -> None:
        """Emit a DEBUG record."""
        self.log(ctx, Level.DEBUG, message, *attributes)

    def info(self, ctx: Context, message: str, *attributes: AttributeLike) -> None:
        """Emit an INFO record."""
        self.log(ctx, Level.INFO, message, *attributes)

    def warn(self, ctx: Context, message: str, *attributes: AttributeLike) -> None:
        """Emit a WARN record."""
        self.log(ctx, Level.WARN, message, *attributes)

    warning = warn

    def error(self, ctx: Context, message: str, *attributes: AttributeLike) -> None:
        """Emit an ERROR record."""
        self.log(ctx, Level.ERROR, message, *attributes)

    def __repr__(self) -> str:
        return (
            f"ContextualLogger(context_keys={self._context_keys!r}, "
            f"underlying={self._underlying!r})"
        )


def build(
    context_keys: Iterable[str],
    underlying: LeveledLogger | None = None,
) -> ContextualLogger:
    """Build a ContextualLogger.

    Args:
        context_keys: Context keys to copy onto records, in output order
        underlying: Logger to delegate to. When omitted, a
            StructlogLeveledLogger writing JSON lines to stdout at INFO is
            created.

    Returns:
        A ContextualLogger
    """
    if underlying is None:
        underlying = StructlogLeveledLogger()
    return ContextualLogger(context_keys, underlying)


def from_settings(
    settings: Settings | None = None,
    file: IO[str] | None = None,
) -> ContextualLogger:
    """Build a ContextualLogger from configuration.

    Args:
        settings: Settings to use, loaded via get_settings() when omitted
        file: Stream overriding the configured one

    Returns:
        A ContextualLogger over a StructlogLeveledLogger
    """
    if settings is None:
        settings = get_settings()
    config = settings.logging
    return ContextualLogger(
        config.context_keys,
        StructlogLeveledLogger.from_config(config, file=file),
    )
