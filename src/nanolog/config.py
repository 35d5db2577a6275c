from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .levels import Level

# journald splits longer messages and the continuation loses its priority
MAX_LINE = 47 * 1024
TRUNCATION_MARKER = " (truncated)"

DEFAULT_INTERACTIVE_THRESHOLD = Level.INFO
# supervisors filter downstream, so keep everything
DEFAULT_DAEMON_THRESHOLD = Level.DEBUG


class Mode(Enum):
    INTERACTIVE = "interactive"  # ANSI colour for a human at a terminal
    DAEMON = "daemon"  # syslog <N> priority for a capturing supervisor


class Decoration(NamedTuple):
    prefix: str
    suffix: str


_RESET = "\033[m"

DECORATIONS: Mapping[Mode, Mapping[Level, Decoration]] = MappingProxyType(
    {
        Mode.INTERACTIVE: MappingProxyType(
            {
                Level.CRIT: Decoration("\033[1;31m", _RESET),
                Level.ERROR: Decoration("\033[1;31m", _RESET),
                Level.WARN: Decoration("\033[1;33m", _RESET),
                Level.INFO: Decoration("", _RESET),
                Level.DEBUG: Decoration("\033[1;36m", _RESET),
            }
        ),
        Mode.DAEMON: MappingProxyType(
            {
                # left bare: the unit sets "SyslogLevel=crit" for undecorated lines
                Level.CRIT: Decoration("", ""),
                Level.ERROR: Decoration("<3>", ""),
                Level.WARN: Decoration("<4>", ""),
                Level.INFO: Decoration("<6>", ""),
                Level.DEBUG: Decoration("<7>", ""),
            }
        ),
    }
)


def decoration_for(mode: Mode, level: Level) -> Decoration:
    return DECORATIONS[mode][level]


def default_threshold(mode: Mode) -> Level:
    if mode is Mode.INTERACTIVE:
        return DEFAULT_INTERACTIVE_THRESHOLD
    return DEFAULT_DAEMON_THRESHOLD


__all__ = [
    "MAX_LINE",
    "TRUNCATION_MARKER",
    "DEFAULT_INTERACTIVE_THRESHOLD",
    "DEFAULT_DAEMON_THRESHOLD",
    "Mode",
    "Decoration",
    "DECORATIONS",
    "decoration_for",
    "default_threshold",
]
