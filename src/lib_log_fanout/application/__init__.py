"""Application layer: entry construction and fan-out."""

from __future__ import annotations

from .broadcaster import BroadcastResult, Broadcaster
from .builder import LogBuilder

__all__ = ["BroadcastResult", "Broadcaster", "LogBuilder"]
