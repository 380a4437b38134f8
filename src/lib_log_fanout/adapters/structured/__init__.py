"""Destinations forwarding entries into other logging systems."""

from __future__ import annotations

from .stdlib_logging import LoggingAdapter

__all__ = ["LoggingAdapter"]
