"""Exception hierarchy for scopelog.

Logging calls themselves never raise scopelog errors; these cover level
parsing and configuration loading.
"""


class ScopelogError(Exception):
    """Base exception for all scopelog errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownLevelError(ScopelogError, ValueError):
    """Raised when a value cannot be mapped to a log level."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown log level: {value!r}")


class ConfigurationError(ScopelogError):
    """Raised when configuration files cannot be located or parsed."""
