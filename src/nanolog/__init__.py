"""nanolog: leveled logging for terminals and supervised daemons.

Lines written to a terminal get ANSI colour; lines captured by a supervisor
(systemd, runit, ...) get syslog ``<N>`` priority prefixes instead, so the
journal can classify them. The version is read from importlib.metadata with
a hardcoded fallback for source checkouts that were never installed.
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .config import MAX_LINE, Mode
from .default import (
    debug,
    error,
    fatal,
    get_default,
    info,
    reset_default,
    set_default,
    set_threshold,
    set_threshold_by_name,
    warn,
)
from .errors import Fatal, InvalidLevel, IOProbeError, NanologError, UnknownLevelName
from .levels import Level
from .logger import Logger

__all__ = [
    "__version__",
    "Logger",
    "Level",
    "Mode",
    "MAX_LINE",
    "NanologError",
    "InvalidLevel",
    "UnknownLevelName",
    "IOProbeError",
    "Fatal",
    "get_default",
    "set_default",
    "reset_default",
    "set_threshold",
    "set_threshold_by_name",
    "fatal",
    "error",
    "warn",
    "info",
    "debug",
]

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
	__version__ = _metadata.version("nanolog")  # type: ignore[assignment]
except Exception:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION
