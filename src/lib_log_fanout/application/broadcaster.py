"""Fan-out of rendered entries to every registered destination.

Purpose
-------
Own the ordered destination registry and deliver each accepted entry to all
destinations, applying the DEBUG filter once, centrally.

Contents
--------
* :class:`Broadcaster` – composite :class:`DestinationPort` implementation.
* ``BroadcastResult`` – diagnostic mapping returned by :meth:`Broadcaster.log`.

System Role
-----------
Sits between :class:`lib_log_fanout.application.builder.LogBuilder` and the
adapters. Registration is rare and serialised by a lock; traversal reads an
immutable snapshot so concurrent broadcasts never observe a torn registry and
never hold the lock while a destination runs.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from lib_log_fanout.application.ports.destination import DestinationPort
from lib_log_fanout.domain.kinds import LogKind

LOGGER = logging.getLogger(__name__)

BroadcastResult = dict[str, Any]
DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


def _debug_always_disabled() -> bool:
    return False


class Broadcaster(DestinationPort):
    """Forward rendered entries to destinations in registration order.

    Examples
    --------
    >>> class Collect:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, text, kind):
    ...         self.lines.append((text, kind.name))
    >>> first, second = Collect(), Collect()
    >>> broadcaster = Broadcaster()
    >>> broadcaster.add_destination(first)
    >>> broadcaster.add_destination(second)
    >>> broadcaster.log("[System] ready", LogKind.INFO)
    {'ok': True, 'delivered': 2, 'failed': 0}
    >>> second.lines
    [('[System] ready', 'INFO')]
    >>> broadcaster.log("[System] noisy", LogKind.DEBUG)
    {'ok': False, 'reason': 'debug_disabled'}
    """

    def __init__(
        self,
        *,
        debug_enabled: Callable[[], bool] = _debug_always_disabled,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        """Create an empty broadcaster.

        Parameters
        ----------
        debug_enabled:
            Callable consulted before forwarding any DEBUG entry. The runtime
            passes a reader of its process-wide flag.
        diagnostic:
            Optional callback receiving ``(name, payload)`` milestones:
            ``debug_suppressed``, ``destination_failed`` and ``broadcast``.
        """
        self._debug_enabled = debug_enabled
        self._diagnostic = diagnostic
        self._destinations: tuple[DestinationPort, ...] = ()
        self._lock = threading.Lock()

    def add_destination(self, destination: DestinationPort) -> None:
        """Append ``destination`` to the registry.

        Raises
        ------
        ValueError
            When ``destination`` is ``None``.
        TypeError
            When ``destination`` does not provide ``emit(text, kind)``.
        """
        if destination is None:
            raise ValueError("destination must not be None")
        if not isinstance(destination, DestinationPort):
            raise TypeError(f"{type(destination).__name__} does not implement emit(text, kind)")
        if destination is self:
            raise ValueError("a broadcaster cannot be registered on itself")
        with self._lock:
            self._destinations = self._destinations + (destination,)

    @property
    def destinations(self) -> tuple[DestinationPort, ...]:
        """Return an immutable snapshot of the registry."""

        return self._destinations

    def __len__(self) -> int:
        return len(self._destinations)

    def log(self, text: str, kind: LogKind) -> BroadcastResult:
        """Deliver ``text`` to every destination unless it is a muted DEBUG entry.

        A destination raising an exception is reported and skipped; delivery
        to the remaining destinations continues.
        """
        if kind is LogKind.DEBUG and not self._debug_enabled():
            self._emit_diagnostic("debug_suppressed", {"kind": kind.name})
            return {"ok": False, "reason": "debug_disabled"}
        return self._fan_out(text, kind)

    def emit(self, text: str, kind: LogKind) -> None:
        """Satisfy :class:`DestinationPort` so broadcasters can be nested.

        The enclosing broadcaster already applied the DEBUG filter, so entries
        arriving here are forwarded without a second check.
        """
        self._fan_out(text, kind)

    def _fan_out(self, text: str, kind: LogKind) -> BroadcastResult:
        delivered = 0
        failed = 0
        for destination in self._destinations:
            try:
                destination.emit(text, kind)
            except Exception as exc:
                failed += 1
                LOGGER.warning("Destination %r failed to emit a %s entry", destination, kind.name, exc_info=True)
                self._emit_diagnostic(
                    "destination_failed",
                    {"destination": type(destination).__name__, "kind": kind.name, "error": repr(exc)},
                )
            else:
                delivered += 1
        self._emit_diagnostic("broadcast", {"kind": kind.name, "delivered": delivered, "failed": failed})
        return {"ok": failed == 0, "delivered": delivered, "failed": failed}

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is None:
            return
        try:
            self._diagnostic(name, payload)
        except Exception:  # pragma: no cover
            LOGGER.debug("Diagnostic hook raised for %s", name, exc_info=True)


__all__ = ["BroadcastResult", "Broadcaster", "DiagnosticHook"]
