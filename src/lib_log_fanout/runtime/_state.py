"""Process-wide runtime singleton and access helpers."""

from __future__ import annotations

from threading import RLock

from ._facade import LogRuntime

_STATE: LogRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LogRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    if runtime is None:
        raise ValueError("runtime must not be None")
    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def reset_runtime() -> None:
    """Drop the active runtime; the next access creates a fresh one."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LogRuntime:
    """Return the active runtime, creating the default one on first use."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is None:
            _STATE = LogRuntime()
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when a runtime has been created or installed."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "current_runtime",
    "is_initialised",
    "reset_runtime",
    "set_runtime",
]
