"""Protocols separating the fan-out core from concrete adapters."""

from __future__ import annotations

from .destination import DestinationPort
from .time import ClockPort, SystemClock

__all__ = ["ClockPort", "DestinationPort", "SystemClock"]
