"""Tests for Level parsing."""

import pytest

from scopelog.exceptions import ScopelogError, UnknownLevelError
from scopelog.levels import Level


class TestLevel:
    """Tests for the Level enum."""

    def test_ordering(self) -> None:
        """Levels are ordered DEBUG < INFO < WARN < ERROR."""
        assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR

    def test_values_match_stdlib(self) -> None:
        """Numeric values line up with the logging module."""
        import logging

        assert Level.DEBUG == logging.DEBUG
        assert Level.INFO == logging.INFO
        assert Level.WARN == logging.WARNING
        assert Level.ERROR == logging.ERROR


class TestParse:
    """Tests for Level.parse."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Level.ERROR, Level.ERROR),
            ("debug", Level.DEBUG),
            ("Info", Level.INFO),
            ("WARN", Level.WARN),
            ("warning", Level.WARN),
            (" error ", Level.ERROR),
            (30, Level.WARN),
        ],
    )
    def test_accepted_values(self, value: Level | int | str, expected: Level) -> None:
        """Members, names and numbers all resolve."""
        assert Level.parse(value) is expected

    @pytest.mark.parametrize("value", ["verbose", "", 25, True, None, 1.5])
    def test_rejected_values(self, value: object) -> None:
        """Unknown values raise UnknownLevelError."""
        with pytest.raises(UnknownLevelError) as exc_info:
            Level.parse(value)  # type: ignore[arg-type]
        assert exc_info.value.value == value

    def test_error_is_value_error(self) -> None:
        """UnknownLevelError is both a ScopelogError and a ValueError."""
        with pytest.raises(ValueError):
            Level.parse("nope")
        assert issubclass(UnknownLevelError, ScopelogError)
