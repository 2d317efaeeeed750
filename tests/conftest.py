"""Shared test fixtures for the scopelog test suite."""

import io
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from scopelog.handlers import StructlogLeveledLogger
from scopelog.levels import Level
from tests.support import RecordingLeveledLogger


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text stream for captured log output."""
    return io.StringIO()


@pytest.fixture
def json_logger(stream: io.StringIO) -> StructlogLeveledLogger:
    """Structlog-backed logger writing untimestamped JSON at DEBUG to ``stream``."""
    return StructlogLeveledLogger(file=stream, level=Level.DEBUG, timestamp=False)


@pytest.fixture
def recorder() -> RecordingLeveledLogger:
    """Recording LeveledLogger double."""
    return RecordingLeveledLogger()


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "[logging]\\nlevel = 'INFO'",
                "development.toml": "[logging]\\nlevel = 'DEBUG'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def isolate_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Clear cached settings, SCOPELOG_* variables and any local config/ dir."""
    from scopelog.config import get_settings

    monkeypatch.chdir(tmp_path)

    for name in (
        "SCOPELOG_CONFIG_DIR",
        "SCOPELOG_ENV",
        "SCOPELOG_LOGGING__LEVEL",
        "SCOPELOG_LOGGING__FORMAT",
        "SCOPELOG_LOGGING__STREAM",
        "SCOPELOG_LOGGING__TIMESTAMP",
        "SCOPELOG_LOGGING__CONTEXT_KEYS",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
