"""Fluent builder assembling a single log entry.

Purpose
-------
Let callers populate an entry field by field (context, kind, message template,
attached exception) and submit it exactly once to a broadcaster.

Contents
--------
* :class:`LogBuilder` – single-shot accumulator with chained setters.
* ``_substitute`` helper applying printf-style substitution.

System Role
-----------
Every runtime shortcut (``info``, ``warn``, ``chat`` ...) is sugar over this
builder. No side effect happens before :meth:`LogBuilder.send`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_log_fanout.application.broadcaster import BroadcastResult, Broadcaster
from lib_log_fanout.domain import LogContext, LogEntry, LogKind


def _substitute(template: str, args: tuple[Any, ...]) -> str:
    """Apply ``%`` substitution, surfacing template/argument mismatches.

    A single mapping argument enables named placeholders, mirroring
    :meth:`logging.LogRecord.getMessage`.

    Examples
    --------
    >>> _substitute("%s had %d errors", ("build", 3))
    'build had 3 errors'
    >>> _substitute("%(user)s joined", ({"user": "ada"},))
    'ada joined'
    """

    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        raise ValueError(f"Message template {template!r} does not match arguments {args!r}: {exc}") from exc


class LogBuilder:
    """Accumulate the fields of one entry and send it to a broadcaster.

    Examples
    --------
    >>> class Collect:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, text, kind):
    ...         self.lines.append((text, kind.name))
    >>> sink = Collect()
    >>> broadcaster = Broadcaster()
    >>> broadcaster.add_destination(sink)
    >>> _ = (
    ...     LogBuilder(broadcaster)
    ...     .context(LogContext("Performance"))
    ...     .kind(LogKind.WARN)
    ...     .message("High memory usage detected: %d MB", 2048)
    ...     .send()
    ... )
    >>> sink.lines
    [('[Performance] High memory usage detected: 2048 MB', 'WARN')]
    """

    def __init__(self, broadcaster: Broadcaster) -> None:
        self._broadcaster = broadcaster
        self._context = LogContext.SYSTEM
        self._kind = LogKind.INFO
        self._message = ""
        self._error: BaseException | None = None
        self._sent = False

    def context(self, context: LogContext | str) -> "LogBuilder":
        """Set the source context; the last call wins."""

        self._context = LogContext.coerce(context)
        return self

    def kind(self, kind: LogKind | str) -> "LogBuilder":
        """Set the entry kind; the last call wins."""

        self._kind = LogKind.coerce(kind)
        return self

    def message(self, template: str, *args: Any) -> "LogBuilder":
        """Set the message, substituting ``args`` when any are given.

        Without ``args`` the template is stored verbatim so literal ``%``
        characters survive.

        Raises
        ------
        ValueError
            When ``args`` do not match the placeholders of ``template``.
        """
        template = str(template)
        self._message = _substitute(template, args) if args else template
        return self

    def exception(self, error: BaseException) -> "LogBuilder":
        """Attach ``error``; a still-default INFO kind becomes EXCEPTION."""

        if error is None:
            raise ValueError("error must not be None")
        self._error = error
        if self._kind is LogKind.INFO:
            self._kind = LogKind.EXCEPTION
        return self

    def build(self) -> LogEntry:
        """Return the immutable entry described by the current fields."""

        return LogEntry(context=self._context, kind=self._kind, message=self._message, error=self._error)

    def send(self) -> BroadcastResult:
        """Render the entry and hand it to the broadcaster.

        Raises
        ------
        RuntimeError
            When the builder has already been sent.
        """
        if self._sent:
            raise RuntimeError("LogBuilder.send() may only be called once per builder")
        self._sent = True
        entry = self.build()
        return self._broadcaster.log(entry.render(), entry.kind)

    @property
    def sent(self) -> bool:
        """Return ``True`` once :meth:`send` has been called."""

        return self._sent


__all__ = ["LogBuilder"]
