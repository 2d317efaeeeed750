"""Log levels understood by scopelog."""

from enum import IntEnum

from scopelog.exceptions import UnknownLevelError

# Accepted spellings that differ from the member names
_ALIASES: dict[str, str] = {"WARNING": "WARN"}


class Level(IntEnum):
    """Severity of a log record.

    Values line up with the stdlib ``logging`` constants so thresholds can be
    handed straight to structlog's filtering loggers.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: "Level | int | str") -> "Level":
        """Coerce a level, level number or case-insensitive name to a Level.

        Args:
            value: Level member, one of the member values, or a name such as
                "info" or "WARNING"

        Returns:
            The matching Level

        Raises:
            UnknownLevelError: If the value matches no level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnknownLevelError(value) from None
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise UnknownLevelError(value)
