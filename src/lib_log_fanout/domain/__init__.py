"""Domain value objects used by the logging facade."""

from __future__ import annotations

from .context import LogContext
from .entry import LogEntry
from .kinds import LogKind

__all__ = [
    "LogContext",
    "LogEntry",
    "LogKind",
]
