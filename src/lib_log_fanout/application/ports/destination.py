"""Destination port describing where rendered entries are delivered.

Purpose
-------
Define the single-method capability every output sink implements, so the
broadcaster depends on a narrow protocol instead of concrete adapters.

Contents
--------
* :class:`DestinationPort` – runtime-checkable protocol with a single ``emit``
  method.

System Role
-----------
Marks the boundary between the fan-out core and adapters (console, file,
stdlib logging). Implementations own their resources and must not raise on
ordinary output failures.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_fanout.domain.kinds import LogKind


@runtime_checkable
class DestinationPort(Protocol):
    """Perform an output side effect for one rendered entry."""

    def emit(self, text: str, kind: LogKind) -> None:
        """Write ``text`` tagged with ``kind``."""


__all__ = ["DestinationPort"]
