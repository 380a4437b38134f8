from __future__ import annotations

import pytest

from lib_log_fanout.domain import LogContext, LogEntry, LogKind


def _raise_and_capture() -> ValueError:
    try:
        raise ValueError("bad input")
    except ValueError as exc:
        return exc


def test_entry_defaults() -> None:
    entry = LogEntry()
    assert entry.context == LogContext.SYSTEM
    assert entry.kind is LogKind.INFO
    assert entry.message == ""
    assert entry.error is None


def test_render_without_error_joins_context_and_message() -> None:
    entry = LogEntry(LogContext("AuthModule"), LogKind.INFO, "Initializing authentication services...")
    assert entry.render() == "[AuthModule] Initializing authentication services..."


def test_render_with_error_appends_type_message_and_traceback() -> None:
    error = _raise_and_capture()
    rendered = LogEntry(LogContext.SYSTEM, LogKind.EXCEPTION, "failed", error).render()

    head, _, trace = rendered.partition("\n")
    assert head == "[System] failed | ValueError: bad input"
    assert trace.startswith("Traceback (most recent call last):")
    assert "_raise_and_capture" in trace
    assert trace.rstrip().endswith("ValueError: bad input")


def test_render_with_unraised_error_still_names_type() -> None:
    rendered = LogEntry(message="x", error=KeyError("k")).render()
    assert rendered.startswith("[System] x | KeyError: 'k'\n")


def test_entry_is_frozen() -> None:
    entry = LogEntry()
    with pytest.raises(AttributeError):
        entry.message = "mutated"  # type: ignore[misc]
