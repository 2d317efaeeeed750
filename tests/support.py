"""Test doubles and helpers shared across the suite."""

import io
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from scopelog.attributes import Attribute
from scopelog.context import Context
from scopelog.levels import Level


@dataclass
class RecordedCall:
    """One call received by RecordingLeveledLogger."""

    ctx: Context
    level: Level
    message: str
    attributes: list[Attribute]


@dataclass
class RecordingLeveledLogger:
    """LeveledLogger double that keeps every call in memory."""

    calls: list[RecordedCall] = field(default_factory=list)

    def log_attrs(
        self,
        ctx: Context,
        level: Level,
        message: str,
        attributes: Sequence[Attribute],
    ) -> None:
        self.calls.append(RecordedCall(ctx, level, message, list(attributes)))


def read_records(stream: io.StringIO) -> list[dict[str, Any]]:
    """Decode every JSON line written to ``stream``."""
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]
