"""Process-wide default logger and the free-function facade over it.

Libraries that want their own prefix or threshold should build a
:class:`~nanolog.logger.Logger` and pass it around; these functions exist for
scripts that just want ``nanolog.info(...)``.
"""
from __future__ import annotations

import threading
from typing import Any, NoReturn, Optional

from .logger import Logger

_DEFAULT: Optional[Logger] = None
_DEFAULT_LOCK = threading.Lock()


def get_default() -> Logger:
    """Return the shared logger, probing stdout the first time."""
    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                _DEFAULT = Logger("", 0)
    return _DEFAULT


def set_default(logger: Logger) -> Optional[Logger]:
    global _DEFAULT
    with _DEFAULT_LOCK:
        previous, _DEFAULT = _DEFAULT, logger
    return previous


def reset_default() -> None:
    global _DEFAULT
    with _DEFAULT_LOCK:
        _DEFAULT = None


def set_threshold(rank: int) -> None:
    get_default().set_threshold(rank)


def set_threshold_by_name(name: str) -> None:
    get_default().set_threshold_by_name(name)


def fatal(fmt: object, *args: Any) -> NoReturn:
    get_default().fatal(fmt, *args)


def error(fmt: object, *args: Any) -> None:
    get_default().error(fmt, *args)


def warn(fmt: object, *args: Any) -> None:
    get_default().warn(fmt, *args)


def info(fmt: object, *args: Any) -> None:
    get_default().info(fmt, *args)


def debug(fmt: object, *args: Any) -> None:
    get_default().debug(fmt, *args)


__all__ = [
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
