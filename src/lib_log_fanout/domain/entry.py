"""Domain value describing one log occurrence.

Purpose
-------
Provide an immutable representation of a single entry and centralise the
display-string contract every destination receives.

Contents
--------
* :class:`LogEntry` dataclass with :meth:`LogEntry.render`.
* ``_format_error`` helper rendering an attached exception with its traceback.

System Role
-----------
Created fresh by :class:`lib_log_fanout.application.builder.LogBuilder` on each
``send()``, rendered once, handed to the broadcaster and then discarded.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass

from .context import LogContext
from .kinds import LogKind


def _format_error(error: BaseException) -> str:
    """Return ``" | Type: message"`` followed by the full traceback text."""

    trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return f" | {type(error).__name__}: {error}\n{trace}"


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable log entry handed from the builder to the broadcaster.

    Attributes
    ----------
    context:
        :class:`LogContext` naming the source of the entry.
    kind:
        :class:`LogKind` category; INFO unless chosen otherwise.
    message:
        Fully substituted message text.
    error:
        Optional exception whose type, message and traceback are appended to
        the rendered text.
    """

    context: LogContext = LogContext.SYSTEM
    kind: LogKind = LogKind.INFO
    message: str = ""
    error: BaseException | None = None

    def render(self) -> str:
        """Return the display string forwarded to destinations.

        Examples
        --------
        >>> LogEntry(LogContext("Net"), LogKind.WARN, "slow link").render()
        '[Net] slow link'
        >>> LogEntry().render()
        '[System] '
        """

        text = f"{self.context.render()} {self.message}"
        if self.error is not None:
            text += _format_error(self.error)
        return text


__all__ = ["LogEntry"]
