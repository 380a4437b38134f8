"""Concrete destination adapters."""

from __future__ import annotations

from .console import RichConsoleAdapter
from .file import FileAdapter
from .structured import LoggingAdapter

__all__ = ["FileAdapter", "LoggingAdapter", "RichConsoleAdapter"]
