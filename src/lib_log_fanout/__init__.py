"""Public package surface of the multi-destination logging facade.

``import lib_log_fanout as log`` gives access to the process-wide shortcuts
(``log.info``, ``log.warn``, ``log.exception`` ...), destination registration,
the fluent builder and the bundled adapters.

Examples
--------
>>> import lib_log_fanout as log
>>> log.LogContext("AuthModule").render()
'[AuthModule]'
"""

from __future__ import annotations

from . import __init__conf__
from .adapters import FileAdapter, LoggingAdapter, RichConsoleAdapter
from .application import Broadcaster, LogBuilder
from .application.ports import DestinationPort
from .domain import LogContext, LogEntry, LogKind
from .runtime import (
    LogRuntime,
    add_destination,
    chat,
    create,
    current_runtime,
    custom,
    debug,
    error,
    exception,
    fatal,
    info,
    is_debug_enabled,
    reset_runtime,
    set_debug_enabled,
    set_runtime,
    warn,
)

SYSTEM = LogContext.SYSTEM

__version__ = __init__conf__.version

__all__ = [
    "Broadcaster",
    "DestinationPort",
    "FileAdapter",
    "LogBuilder",
    "LogContext",
    "LogEntry",
    "LogKind",
    "LogRuntime",
    "LoggingAdapter",
    "RichConsoleAdapter",
    "SYSTEM",
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
    "reset_runtime",
    "set_debug_enabled",
    "set_runtime",
    "warn",
]
