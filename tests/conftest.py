from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_fanout.domain.kinds import LogKind
from lib_log_fanout.runtime import reset_runtime


class RecordingDestination:
    """Destination collecting every ``(text, kind)`` pair it receives."""

    def __init__(self, name: str = "recorder", journal: list[tuple[str, str, LogKind]] | None = None) -> None:
        self.name = name
        self.calls: list[tuple[str, LogKind]] = []
        self.journal = journal

    def emit(self, text: str, kind: LogKind) -> None:
        self.calls.append((text, kind))
        if self.journal is not None:
            self.journal.append((self.name, text, kind))


class FailingDestination:
    """Destination whose output always fails."""

    def __init__(self) -> None:
        self.attempts = 0

    def emit(self, text: str, kind: LogKind) -> None:
        self.attempts += 1
        raise OSError("disk full")


class FixedClock:
    def __init__(self, moment: datetime | None = None) -> None:
        self.moment = moment or datetime(2025, 9, 23, 12, 30, 45, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.moment


@pytest.fixture(autouse=True)
def _isolated_runtime() -> Iterator[None]:
    reset_runtime()
    yield
    reset_runtime()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system="truecolor", force_terminal=True)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def recorder() -> RecordingDestination:
    return RecordingDestination()


@pytest.fixture
def make_recorder() -> type[RecordingDestination]:
    return RecordingDestination


@pytest.fixture
def failing_destination() -> FailingDestination:
    return FailingDestination()
