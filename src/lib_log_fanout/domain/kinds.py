"""Log kind abstraction used to tag every log entry.

Purpose
-------
Provide the fixed set of categories an entry can carry. Kinds drive filtering
(DEBUG) and destination-specific presentation (colours, labels), never
business logic.

Contents
--------
* :class:`LogKind` enum with name coercion and presentation helpers.
* ``_PYTHON_LEVELS`` constant mapping kinds to :mod:`logging` levels.

System Role
-----------
Shared by the builder, the broadcaster, and every destination adapter so that
severity handling stays consistent across the package.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogKind(Enum):
    """Mutually exclusive categories of a log entry."""

    INFO = "info"
    ERROR = "error"
    DEBUG = "debug"
    EXCEPTION = "exception"
    WARN = "warn"
    CHAT = "chat"
    CUSTOM = "custom"
    FATAL = "fatal"

    @property
    def label(self) -> str:
        """Return the label printed by human-facing destinations.

        Examples
        --------
        >>> LogKind.EXCEPTION.label
        'ERROR'
        >>> LogKind.CHAT.label
        'CHAT'
        """

        if self is LogKind.EXCEPTION:
            return LogKind.ERROR.name
        return self.name

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this kind."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogKind":
        """Return the kind named ``name`` (case-insensitive).

        Examples
        --------
        >>> LogKind.from_name(" warn ")
        <LogKind.WARN: 'warn'>
        """

        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log kind: {name!r}") from exc

    @classmethod
    def coerce(cls, value: "LogKind | str") -> "LogKind":
        """Accept either a :class:`LogKind` or its name."""

        if isinstance(value, LogKind):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        raise ValueError(f"kind must be a LogKind or a kind name, got {value!r}")


_PYTHON_LEVELS = {
    LogKind.DEBUG: logging.DEBUG,
    LogKind.INFO: logging.INFO,
    LogKind.CHAT: logging.INFO,
    LogKind.CUSTOM: logging.INFO,
    LogKind.WARN: logging.WARNING,
    LogKind.ERROR: logging.ERROR,
    LogKind.EXCEPTION: logging.ERROR,
    LogKind.FATAL: logging.CRITICAL,
}
# Stdlib levels used when bridging entries into :mod:`logging`.


__all__ = ["LogKind"]
