"""Bridge forwarding entries into the standard :mod:`logging` module.

Purpose
-------
Let hosts that already configure stdlib handlers (syslog, rotating files,
journald) receive facade entries through those handlers.

Contents
--------
* :class:`LoggingAdapter` - concrete :class:`DestinationPort`.
"""

from __future__ import annotations

import logging

from lib_log_fanout.application.ports.destination import DestinationPort
from lib_log_fanout.domain.kinds import LogKind


class LoggingAdapter(DestinationPort):
    """Emit entries via :meth:`logging.Logger.log` at the mapped level."""

    def __init__(self, logger: logging.Logger | str = "lib_log_fanout.entries") -> None:
        self._logger = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def emit(self, text: str, kind: LogKind) -> None:
        """Forward ``text``; ``%`` characters are passed through untouched."""

        self._logger.log(kind.to_python_level(), "%s", text, extra={"log_kind": kind.name})


__all__ = ["LoggingAdapter"]
