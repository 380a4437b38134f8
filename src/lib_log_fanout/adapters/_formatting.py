"""Text helpers shared by adapters that write plain-text records.

Contents
--------
* :func:`strip_ansi` – remove ANSI SGR colour sequences.
* :func:`format_file_record` – build the persisted one-entry record.
"""

from __future__ import annotations

import re
from datetime import datetime

from lib_log_fanout.domain.kinds import LogKind

ANSI_RE = re.compile(r"\x1b\[[;\d]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m alert")
    'red alert'
    """

    return ANSI_RE.sub("", text)


def format_file_record(timestamp: datetime, kind: LogKind, text: str) -> str:
    """Return ``"[<timestamp>] [<KIND>] <text>"`` terminated by a newline.

    Examples
    --------
    >>> from datetime import timezone
    >>> ts = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)
    >>> format_file_record(ts, LogKind.WARN, "\x1b[33m[System] disk low\x1b[0m")
    '[2025-09-23T12:00:00+00:00] [WARN] [System] disk low\\n'
    """

    return f"[{timestamp.isoformat()}] [{kind.name}] {strip_ansi(text)}\n"


__all__ = ["ANSI_RE", "format_file_record", "strip_ansi"]
