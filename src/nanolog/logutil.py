"""Diagnostics channel for nanolog itself.

nanolog's own output goes to stdout, so problems inside the library (a bad
format string, the outcome of the terminal probe) are reported on a separate
stdlib logger that writes to stderr. Applications can reconfigure it like any
other ``logging`` logger; we stay at WARNING unless told otherwise.
"""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("nanolog")
        # Only add a handler if the application hasn't configured logging.
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER

__all__ = ["get_logger"]
