"""Environment and ``.env`` helpers for the logging facade.

Purpose
-------
Let hosts switch DEBUG delivery on from the environment (or a ``.env`` file)
without wiring the flag by hand.

Contents
--------
* :data:`DEBUG_ENV_VAR`, :data:`DOTENV_ENV_VAR` - recognised variables.
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* :func:`debug_enabled_from_env` - parse the DEBUG toggle.
* :func:`configure_from_env` - apply the toggle to a runtime.

System Role
-----------
Optional edge helper; the core never reads the environment on its own.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_fanout.runtime import LogRuntime, current_runtime

DEBUG_ENV_VAR = "LOG_FANOUT_DEBUG"
DOTENV_ENV_VAR = "LOG_FANOUT_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def _is_truthy(value: str | None) -> bool:
    """Return ``True`` for the usual affirmative spellings.

    Examples
    --------
    >>> _is_truthy(" Yes ")
    True
    >>> _is_truthy("0"), _is_truthy(None)
    (False, False)
    """

    return value is not None and value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search walks upwards from the current working directory. Only the
    first call per process touches the filesystem; later calls return the
    cached result.
    """
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        _DOTENV_LOADED = path
        return path


def debug_enabled_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return the DEBUG toggle read from :data:`DEBUG_ENV_VAR`."""

    source = os.environ if environ is None else environ
    return _is_truthy(source.get(DEBUG_ENV_VAR))


def configure_from_env(runtime: LogRuntime | None = None) -> bool:
    """Apply the environment DEBUG toggle to ``runtime`` (default: active one).

    When :data:`DOTENV_ENV_VAR` is truthy the nearest ``.env`` is loaded first.
    Returns the value applied.
    """
    if _is_truthy(os.environ.get(DOTENV_ENV_VAR)):
        enable_dotenv()
    target = runtime if runtime is not None else current_runtime()
    enabled = debug_enabled_from_env()
    target.set_debug_enabled(enabled)
    return enabled


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = [
    "DEBUG_ENV_VAR",
    "DOTENV_ENV_VAR",
    "configure_from_env",
    "debug_enabled_from_env",
    "enable_dotenv",
]
