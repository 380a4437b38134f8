"""Service object behind the process-wide logging facade.

Purpose
-------
Bundle the single broadcaster, the debug-enabled flag and the termination hook
used by ``fatal`` into one explicitly constructed object, so the module-level
API in :mod:`lib_log_fanout.runtime` stays thin and tests can build isolated
instances.

Contents
--------
* :class:`LogRuntime` - registration, builder factory and level shortcuts.
* ``Terminate`` - signature of the injectable process-exit function.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn

from lib_log_fanout.application import BroadcastResult, Broadcaster, LogBuilder
from lib_log_fanout.application.broadcaster import DiagnosticHook
from lib_log_fanout.application.ports import DestinationPort
from lib_log_fanout.domain import LogContext, LogKind

Terminate = Callable[[int], Any]

FATAL_EXIT_STATUS = 1


class LogRuntime:
    """Owner of the broadcaster and the DEBUG flag for one logging scope.

    Examples
    --------
    >>> class Collect:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, text, kind):
    ...         self.lines.append((text, kind.name))
    >>> runtime = LogRuntime()
    >>> sink = Collect()
    >>> runtime.add_destination(sink)
    >>> _ = runtime.chat("AuthModule", "User123", "hello")
    >>> runtime.debug("hidden")
    >>> sink.lines
    [('[AuthModule] [User123]: hello', 'CHAT')]
    """

    def __init__(
        self,
        *,
        debug_enabled: bool = False,
        terminate: Terminate = sys.exit,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._debug_enabled = bool(debug_enabled)
        self._terminate = terminate
        self._broadcaster = Broadcaster(debug_enabled=self.is_debug_enabled, diagnostic=diagnostic)

    @property
    def broadcaster(self) -> Broadcaster:
        return self._broadcaster

    def set_debug_enabled(self, enabled: bool) -> None:
        """Toggle delivery of DEBUG entries for subsequent calls."""

        self._debug_enabled = bool(enabled)

    def is_debug_enabled(self) -> bool:
        return self._debug_enabled

    def add_destination(self, destination: DestinationPort) -> None:
        """Register ``destination``; see :meth:`Broadcaster.add_destination`."""

        self._broadcaster.add_destination(destination)

    def create(self) -> LogBuilder:
        """Return a fresh builder bound to this runtime's broadcaster."""

        return LogBuilder(self._broadcaster)

    def _send(self, kind: LogKind, context: LogContext | str | None, message: str, args: tuple[Any, ...]) -> BroadcastResult:
        builder = self.create().kind(kind)
        if context is not None:
            builder.context(context)
        return builder.message(message, *args).send()

    def info(self, message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
        return self._send(LogKind.INFO, context, message, args)

    def warn(self, message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
        return self._send(LogKind.WARN, context, message, args)

    def error(self, message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
        return self._send(LogKind.ERROR, context, message, args)

    def custom(self, message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
        """Log a user-defined entry that fits no standard severity."""

        return self._send(LogKind.CUSTOM, context, message, args)

    def debug(self, message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult | None:
        """Log a DEBUG entry; returns ``None`` without building when DEBUG is off.

        The broadcaster re-checks the flag, so a toggle racing with this call
        is resolved there.
        """
        if not self._debug_enabled:
            return None
        return self._send(LogKind.DEBUG, context, message, args)

    def chat(self, context: LogContext | str | None, user: str, message: str) -> BroadcastResult:
        """Log a chat line rendered as ``[<user>]: <message>``."""

        return self._send(LogKind.CHAT, context, "[%s]: %s", (user, message))

    def exception(
        self,
        error: BaseException | None = None,
        message: str = "",
        *args: Any,
        context: LogContext | str | None = None,
    ) -> BroadcastResult:
        """Log ``error`` (or the exception being handled) with its traceback.

        Raises
        ------
        ValueError
            When ``error`` is omitted outside an ``except`` block.
        """
        if error is None:
            error = sys.exc_info()[1]
            if error is None:
                raise ValueError("exception() needs an error or an active exception")
        builder = self.create().kind(LogKind.EXCEPTION).exception(error)
        if context is not None:
            builder.context(context)
        return builder.message(message, *args).send()

    def fatal(self, context: LogContext | str | None, message: str, *args: Any) -> NoReturn:
        """Log a FATAL entry, then terminate the process with status ``1``.

        With the default :func:`sys.exit` terminator the interpreter shuts down
        normally (``atexit`` handlers run); callers must treat this call as
        non-returning.
        """
        self._send(LogKind.FATAL, context, message, args)
        self._terminate(FATAL_EXIT_STATUS)
        raise SystemExit(FATAL_EXIT_STATUS)


__all__ = ["FATAL_EXIT_STATUS", "LogRuntime", "Terminate"]
