from __future__ import annotations

import logging

import pytest

from lib_log_fanout.domain.kinds import LogKind


def test_kind_enumeration_is_fixed() -> None:
    assert [kind.name for kind in LogKind] == [
        "INFO",
        "ERROR",
        "DEBUG",
        "EXCEPTION",
        "WARN",
        "CHAT",
        "CUSTOM",
        "FATAL",
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("info", LogKind.INFO),
        ("WARN", LogKind.WARN),
        (" Exception ", LogKind.EXCEPTION),
        ("chat", LogKind.CHAT),
        ("Fatal", LogKind.FATAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogKind) -> None:
    assert LogKind.from_name(name) is expected


def test_from_name_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError, match="Unknown log kind"):
        LogKind.from_name("verbose")


def test_coerce_passes_kinds_through_and_rejects_other_types() -> None:
    assert LogKind.coerce(LogKind.DEBUG) is LogKind.DEBUG
    assert LogKind.coerce("custom") is LogKind.CUSTOM
    with pytest.raises(ValueError):
        LogKind.coerce(42)  # type: ignore[arg-type]


def test_exception_is_labelled_as_error() -> None:
    assert LogKind.EXCEPTION.label == "ERROR"
    assert LogKind.WARN.label == "WARN"


@pytest.mark.parametrize(
    "kind, level",
    [
        (LogKind.DEBUG, logging.DEBUG),
        (LogKind.INFO, logging.INFO),
        (LogKind.CHAT, logging.INFO),
        (LogKind.CUSTOM, logging.INFO),
        (LogKind.WARN, logging.WARNING),
        (LogKind.ERROR, logging.ERROR),
        (LogKind.EXCEPTION, logging.ERROR),
        (LogKind.FATAL, logging.CRITICAL),
    ],
)
def test_to_python_level_maps_every_kind(kind: LogKind, level: int) -> None:
    assert kind.to_python_level() == level
