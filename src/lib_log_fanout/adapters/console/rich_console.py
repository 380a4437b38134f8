"""Rich-powered console adapter implementing :class:`DestinationPort`.

Purpose
-------
Render entries on an interactive terminal with a per-kind coloured label.

Contents
--------
* :data:`_STYLE_MAP` - default kind-to-style mapping.
* :data:`_LABEL_MAP` - labels padded for the badge-style kinds.
* :class:`RichConsoleAdapter` - the adapter itself.

System Role
-----------
Primary human-facing destination. Output failures (closed stream, broken pipe)
are reported through the module logger and never reach the broadcaster.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from lib_log_fanout.application.ports.destination import DestinationPort
from lib_log_fanout.application.ports.time import ClockPort, SystemClock
from lib_log_fanout.domain.kinds import LogKind

LOGGER = logging.getLogger(__name__)

_STYLE_MAP: Mapping[LogKind, str] = {
    LogKind.INFO: "cyan",
    LogKind.WARN: "yellow",
    LogKind.CUSTOM: "bright_blue",
    LogKind.DEBUG: "bright_white",
    LogKind.ERROR: "red",
    LogKind.EXCEPTION: "red",
    LogKind.FATAL: "bold black on red",
    LogKind.CHAT: "green",
}

#: Default Rich styles keyed by :class:`LogKind`.

_LABEL_MAP: Mapping[LogKind, str] = {
    LogKind.CUSTOM: " CUSTOM ",
    LogKind.FATAL: " FATAL ",
}


class RichConsoleAdapter(DestinationPort):
    """Print entries as ``[HH:MM:SS] LABEL | text`` using Rich."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogKind | str, str] | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._clock = clock or SystemClock()
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogKind.coerce(key)] = value
        self._style_map = merged

    def emit(self, text: str, kind: LogKind) -> None:
        """Print ``text`` with the coloured label for ``kind``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit('[System] ready', LogKind.INFO)
        >>> 'INFO | [System] ready' in console.export_text()
        True
        """
        try:
            self._console.print(self._format_line(text, kind), highlight=False, soft_wrap=True)
        except (OSError, ValueError):
            LOGGER.warning("Console destination could not write a %s entry", kind.name, exc_info=True)

    def _format_line(self, text: str, kind: LogKind) -> Text:
        """Return the styled console line for one entry."""

        stamp = self._clock.now().astimezone().strftime("%H:%M:%S")
        style = "" if self._no_color else self._style_map.get(kind, "")
        label = _LABEL_MAP.get(kind, kind.label)
        line = Text.assemble(f"[{stamp}] ", (label, style), " | ")
        line.append_text(Text.from_ansi(text))
        return line


__all__ = ["RichConsoleAdapter"]
