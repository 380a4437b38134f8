"""Static package metadata surfaced to ``lib_log_fanout.__version__``."""

from __future__ import annotations

name = "lib_log_fanout"
title = "Multi-destination logging facade with fluent entry builder"
version = "0.1.0"
author = "bitranox"
