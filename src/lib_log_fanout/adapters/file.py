"""Append-only text file destination.

Purpose
-------
Persist every entry as one plain-text record so logs survive the process.

Contents
--------
* :class:`FileAdapter` - :class:`DestinationPort` writing
  ``[<timestamp>] [<KIND>] <text>`` records with ANSI codes stripped.

System Role
-----------
Owns its file handle: opened on construction, flushed after every record and
released through :meth:`FileAdapter.close` (the broadcaster never closes
destinations). Write failures are logged and swallowed.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from types import TracebackType
from typing import TextIO

from lib_log_fanout.application.ports.destination import DestinationPort
from lib_log_fanout.application.ports.time import ClockPort, SystemClock
from lib_log_fanout.domain.kinds import LogKind

from ._formatting import format_file_record

LOGGER = logging.getLogger(__name__)


class FileAdapter(DestinationPort):
    """Write entries to ``path`` in append mode.

    Examples
    --------
    >>> import tempfile
    >>> target = Path(tempfile.mkdtemp()) / "logs" / "app.log"
    >>> with FileAdapter(target) as adapter:
    ...     adapter.emit("[System] started", LogKind.INFO)
    >>> target.read_text(encoding="utf-8").rstrip().endswith("[INFO] [System] started")
    True
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8", clock: ClockPort | None = None) -> None:
        """Open ``path`` for appending, creating parent directories.

        Raises
        ------
        OSError
            When the file cannot be opened; construction is the only place
            this adapter lets an I/O error escape.
        """
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._handle: TextIO | None = self._path.open("a", encoding=encoding)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle is None

    def emit(self, text: str, kind: LogKind) -> None:
        """Append one record for ``text`` and flush it to disk."""

        record = format_file_record(self._clock.now(), kind, text)
        with self._lock:
            if self._handle is None:
                LOGGER.warning("File destination %s is closed; dropping %s entry", self._path, kind.name)
                return
            try:
                self._handle.write(record)
                self._handle.flush()
            except (OSError, ValueError):
                LOGGER.warning("File destination %s could not write a %s entry", self._path, kind.name, exc_info=True)

    def close(self) -> None:
        """Release the file handle; further entries are dropped."""

        with self._lock:
            if self._handle is None:
                return
            handle, self._handle = self._handle, None
            handle.close()

    def __enter__(self) -> "FileAdapter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileAdapter(path={str(self._path)!r})"


__all__ = ["FileAdapter"]
