"""Process-wide logging façade.

Purpose
-------
Expose the static entry point application code calls (``info``, ``warn``,
``error``, ``debug``, ``chat``, ``exception``, ``custom``, ``fatal``) without
knowing which destinations exist. Every call builds a
:class:`~lib_log_fanout.application.builder.LogBuilder`, populates it and sends
it through the broadcaster of the active :class:`LogRuntime`.

Contents
--------
* Registration and configuration: :func:`add_destination`,
  :func:`set_debug_enabled`, :func:`is_debug_enabled`.
* Builder access: :func:`create`.
* Shortcuts: :func:`info`, :func:`warn`, :func:`error`, :func:`debug`,
  :func:`chat`, :func:`exception`, :func:`custom`, :func:`fatal`.
* Runtime access: :func:`current_runtime`, :func:`set_runtime`,
  :func:`reset_runtime`.

System Role
-----------
Outer shell of the package. The process-wide runtime lives for the whole
process; tests swap it with :func:`set_runtime` or build their own
:class:`LogRuntime`.
"""

from __future__ import annotations

from typing import Any, NoReturn

from lib_log_fanout.application import BroadcastResult, LogBuilder
from lib_log_fanout.application.ports import DestinationPort
from lib_log_fanout.domain import LogContext

from ._facade import FATAL_EXIT_STATUS, LogRuntime, Terminate
from ._state import current_runtime, is_initialised, reset_runtime, set_runtime


def set_debug_enabled(enabled: bool) -> None:
    """Toggle DEBUG delivery process-wide; effective for subsequent calls."""

    current_runtime().set_debug_enabled(enabled)


def is_debug_enabled() -> bool:
    return current_runtime().is_debug_enabled()


def add_destination(destination: DestinationPort) -> None:
    """Register ``destination`` with the process-wide broadcaster.

    Raises
    ------
    ValueError
        When ``destination`` is ``None``.
    TypeError
        When ``destination`` has no ``emit(text, kind)`` method.

    Examples
    --------
    >>> add_destination(None)
    Traceback (most recent call last):
    ...
    ValueError: destination must not be None
    """
    current_runtime().add_destination(destination)


def create() -> LogBuilder:
    """Return a fresh builder bound to the process-wide broadcaster."""

    return current_runtime().create()


def info(message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
    """Log an informational message."""

    return current_runtime().info(message, *args, context=context)


def warn(message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
    """Log a warning."""

    return current_runtime().warn(message, *args, context=context)


def error(message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
    """Log an error that still allows the application to continue."""

    return current_runtime().error(message, *args, context=context)


def debug(message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult | None:
    """Log a DEBUG message when debugging is enabled."""

    return current_runtime().debug(message, *args, context=context)


def custom(message: str, *args: Any, context: LogContext | str | None = None) -> BroadcastResult:
    """Log a user-defined entry."""

    return current_runtime().custom(message, *args, context=context)


def chat(context: LogContext | str | None, user: str, message: str) -> BroadcastResult:
    """Log a chat message rendered as ``[<user>]: <message>``."""

    return current_runtime().chat(context, user, message)


def exception(
    error: BaseException | None = None,
    message: str = "",
    *args: Any,
    context: LogContext | str | None = None,
) -> BroadcastResult:
    """Log an exception with its traceback.

    Without ``error`` the exception currently being handled is used.

    Examples
    --------
    >>> try:
    ...     {}["missing"]
    ... except KeyError:
    ...     result = exception(message="lookup failed")
    >>> result["ok"]
    True
    """
    return current_runtime().exception(error, message, *args, context=context)


def fatal(context: LogContext | str | None, message: str, *args: Any) -> NoReturn:
    """Log a FATAL entry and terminate the process with a non-zero status."""

    current_runtime().fatal(context, message, *args)


__all__ = [
    "FATAL_EXIT_STATUS",
    "LogRuntime",
    "Terminate",
    "add_destination",
    "chat",
    "create",
    "current_runtime",
    "custom",
    "debug",
    "error",
    "exception",
    "fatal",
    "info",
    "is_debug_enabled",
    "is_initialised",
    "reset_runtime",
    "set_debug_enabled",
    "set_runtime",
    "warn",
]
