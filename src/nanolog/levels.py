from enum import IntEnum

from .errors import UnknownLevelName


class Level(IntEnum):
    """Syslog-compatible severity ranks; lower is more severe.

    A message at ``level`` passes a logger's filter when ``level <= threshold``.
    Fatal has no rank of its own and is decorated like CRIT.
    """

    CRIT = 3
    ERROR = 4
    WARN = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Level":
        # case-sensitive: "Warn" is not a level
        for level in cls:
            if level.label == name:
                return level
        raise UnknownLevelName(name)


LEVEL_NAMES = tuple(level.label for level in Level)

__all__ = ["Level", "LEVEL_NAMES"]
