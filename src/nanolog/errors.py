"""Error kinds raised by nanolog.

Everything except :class:`Fatal` is a recoverable error handed back to the
caller. ``Fatal`` is the termination signal of ``Logger.fatal`` and derives
from BaseException so that ``except Exception`` blocks let it through.
"""
from __future__ import annotations


class NanologError(Exception):
    """Base class for recoverable nanolog errors."""


class InvalidLevel(NanologError, ValueError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invalid log level {value}")


class UnknownLevelName(NanologError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown level {name}")


class IOProbeError(NanologError, OSError):
    """Terminal probe failed for a reason other than "not a terminal".

    Raised as ``IOProbeError(errno, strerror)`` so ``.errno`` survives.
    """


class Fatal(BaseException):
    """Raised by ``fatal()``; ``line`` holds the composed log line."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(line)

    def __str__(self) -> str:
        return self.line.rstrip("\n")


__all__ = ["NanologError", "InvalidLevel", "UnknownLevelName", "IOProbeError", "Fatal"]
