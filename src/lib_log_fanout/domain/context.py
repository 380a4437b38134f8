"""Named context identifying the logical source of a log entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(slots=True, frozen=True)
class LogContext:
    """Immutable source tag such as ``System`` or ``AuthModule``.

    Two contexts are equal when their names are equal. The rendered form wraps
    the name in square brackets.

    Examples
    --------
    >>> LogContext("AuthModule").render()
    '[AuthModule]'
    >>> LogContext("System") == LogContext.SYSTEM
    True
    """

    name: str

    SYSTEM: ClassVar["LogContext"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"context name must be a string, got {self.name!r}")

    def render(self) -> str:
        """Return the bracketed display form used in rendered entries."""

        return f"[{self.name}]"

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def coerce(cls, value: "LogContext | str | None") -> "LogContext":
        """Accept a :class:`LogContext` or a plain name; reject ``None``."""

        if value is None:
            raise ValueError("context must not be None")
        if isinstance(value, LogContext):
            return value
        return cls(value)


LogContext.SYSTEM = LogContext("System")


__all__ = ["LogContext"]
