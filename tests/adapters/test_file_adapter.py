from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lib_log_fanout.adapters._formatting import format_file_record, strip_ansi
from lib_log_fanout.adapters.file import FileAdapter
from lib_log_fanout.domain.kinds import LogKind


def test_file_adapter_writes_one_record_per_entry(tmp_path: Path, fixed_clock) -> None:
    target = tmp_path / "logs.txt"
    with FileAdapter(target, clock=fixed_clock) as adapter:
        adapter.emit("[System] Application starting...", LogKind.INFO)
        adapter.emit("[AuthModule] \x1b[32mok\x1b[0m", LogKind.CHAT)

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "[2025-09-23T12:30:45+00:00] [INFO] [System] Application starting...",
        "[2025-09-23T12:30:45+00:00] [CHAT] [AuthModule] ok",
    ]


def test_file_adapter_flushes_every_record(tmp_path: Path, fixed_clock) -> None:
    target = tmp_path / "live.log"
    adapter = FileAdapter(target, clock=fixed_clock)
    try:
        adapter.emit("[System] visible before close", LogKind.WARN)
        assert "visible before close" in target.read_text(encoding="utf-8")
    finally:
        adapter.close()


def test_file_adapter_appends_to_existing_file(tmp_path: Path, fixed_clock) -> None:
    target = tmp_path / "append.log"
    target.write_text("previous line\n", encoding="utf-8")
    with FileAdapter(target, clock=fixed_clock) as adapter:
        adapter.emit("[System] next", LogKind.INFO)
    assert target.read_text(encoding="utf-8").splitlines()[0] == "previous line"


def test_file_adapter_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "app.log"
    with FileAdapter(target):
        pass
    assert target.exists()


def test_file_adapter_drops_entries_after_close(tmp_path: Path, fixed_clock, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "closed.log"
    adapter = FileAdapter(target, clock=fixed_clock)
    adapter.close()
    adapter.close()
    assert adapter.closed

    with caplog.at_level(logging.WARNING, logger="lib_log_fanout.adapters.file"):
        adapter.emit("[System] too late", LogKind.ERROR)

    assert target.read_text(encoding="utf-8") == ""
    assert "is closed" in caplog.text


def test_file_adapter_swallows_write_errors(tmp_path: Path, fixed_clock, caplog: pytest.LogCaptureFixture) -> None:
    adapter = FileAdapter(tmp_path / "broken.log", clock=fixed_clock)

    class _BrokenHandle:
        def write(self, _: str) -> int:
            raise OSError("No space left on device")

        def flush(self) -> None:
            pass

        def close(self) -> None:
            pass

    adapter._handle.close()  # type: ignore[union-attr]
    adapter._handle = _BrokenHandle()  # type: ignore[assignment]

    with caplog.at_level(logging.WARNING, logger="lib_log_fanout.adapters.file"):
        adapter.emit("[System] lost", LogKind.INFO)

    assert "could not write" in caplog.text
    adapter.close()


def test_file_adapter_construction_errors_propagate(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OSError):
        FileAdapter(blocker / "child.log")


def test_strip_ansi_removes_colour_sequences() -> None:
    assert strip_ansi("\x1b[1;31mFATAL\x1b[0m done") == "FATAL done"
    assert strip_ansi("no codes [System]") == "no codes [System]"


def test_format_file_record_uses_kind_name(fixed_clock) -> None:
    record = format_file_record(fixed_clock.now(), LogKind.EXCEPTION, "[System] x")
    assert record == "[2025-09-23T12:30:45+00:00] [EXCEPTION] [System] x\n"
