"""Leveled logger with terminal/daemon aware decorations.

A :class:`Logger` decides once, when it is built, whether its output goes to
a terminal (ANSI colour) or to a supervisor such as systemd capturing stdout
(syslog ``<N>`` priority prefixes). Every emitted line is

    decoration prefix + logger prefix + message + decoration suffix + "\\n"

with embedded newlines re-tagged so each physical line carries the priority,
and overlong messages cut at ``MAX_LINE`` bytes of UTF-8.
"""
from __future__ import annotations

import errno
import io
import sys
import termios
import threading
from typing import Any, Mapping, NoReturn, Optional, TextIO

from .config import MAX_LINE, TRUNCATION_MARKER, Mode, decoration_for, default_threshold
from .errors import Fatal, InvalidLevel, IOProbeError
from .levels import Level
from .logutil import get_logger

# All loggers share stdout, so one lock keeps lines from interleaving.
_WRITE_LOCK = threading.Lock()


def probe_interactive(stream: TextIO) -> bool:
    """Return True when ``stream`` is attached to a terminal.

    ENOTTY from the terminal-attributes query is the ordinary "not a
    terminal" answer, and so is a stream with no file descriptor at all
    (StringIO, pytest's capture buffers). Anything else is an IOProbeError.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return False
    except ValueError as exc:  # closed file
        raise IOProbeError(errno.EBADF, f"terminal probe failed: {exc}") from exc
    try:
        termios.tcgetattr(fd)
    except termios.error as exc:
        code = exc.args[0] if exc.args else None
        if code == errno.ENOTTY:
            return False
        reason = exc.args[-1] if exc.args else "unknown error"
        raise IOProbeError(code, f"terminal probe failed: {reason}") from exc
    return True


def _truncate(message: str) -> str:
    """Cut ``message`` to at most MAX_LINE UTF-8 bytes, on a character boundary."""
    encoded = message.encode("utf-8", "surrogatepass")
    if len(encoded) <= MAX_LINE:
        return message
    # "ignore" drops a multibyte sequence split by the cut
    return encoded[:MAX_LINE].decode("utf-8", "ignore") + TRUNCATION_MARKER


def _safe_repr(obj: object) -> str:
    try:
        return repr(obj)
    except Exception as exc:  # noqa: BLE001 - a broken __repr__ must not crash logging
        return f"<unprintable {type(obj).__name__}: {type(exc).__name__}>"


def _interpolate(fmt: object, args: tuple) -> str:
    try:
        msg = str(fmt)
    except Exception as exc:  # noqa: BLE001
        get_logger().warning("unprintable log message: %s", exc)
        return f"%!(BADMESSAGE {_safe_repr(fmt)}: {type(exc).__name__})"
    if not args:
        return msg
    # same convention as logging.LogRecord: a lone mapping feeds %(name)s
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]  # type: ignore[assignment]
    try:
        return msg % args
    except Exception as exc:  # noqa: BLE001 - like logging.Handler.handleError, never raise
        get_logger().warning("format mismatch in %r: %s", msg, exc)
        return f"{msg} %!(BADFORMAT {_safe_repr(args)}: {exc})"


class Logger:
    """Severity-filtered logger writing decorated lines to stdout.

    ``threshold`` 0 picks the default for the detected mode: INFO at a
    terminal, DEBUG under a supervisor. Explicit thresholds must be a rank
    between CRIT (3) and DEBUG (7). ``stream`` replaces stdout (it is also
    what gets probed) and ``mode`` skips the probe entirely.
    """

    def __init__(
        self,
        prefix: str = "",
        threshold: int = 0,
        *,
        stream: Optional[TextIO] = None,
        mode: Optional[Mode] = None,
    ) -> None:
        if threshold != 0 and not Level.CRIT <= threshold <= Level.DEBUG:
            raise InvalidLevel(threshold)
        if mode is None:
            probed = probe_interactive(stream if stream is not None else sys.stdout)
            mode = Mode.INTERACTIVE if probed else Mode.DAEMON
            get_logger().debug("stdout probe: %s", mode.value)
        self.prefix = prefix
        self.threshold: int = int(threshold) if threshold else int(default_threshold(mode))
        self._mode = mode
        self._stream = stream

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, threshold={self.threshold}, mode={self._mode.value})"

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def interactive(self) -> bool:
        return self._mode is Mode.INTERACTIVE

    def set_threshold(self, rank: int) -> None:
        # unvalidated; an odd rank just enables or disables levels oddly
        self.threshold = rank

    def set_threshold_by_name(self, name: str) -> None:
        self.threshold = int(Level.from_name(name))

    def enabled_for(self, level: int) -> bool:
        return level <= self.threshold

    def format_line(self, level: Level, fmt: object, args: tuple = ()) -> str:
        """Compose the full output line for ``level``, trailing newline included."""
        deco = decoration_for(self._mode, level)
        message = _truncate(_interpolate(fmt, args))
        # journald assigns priority per physical line
        message = message.replace("\n", "\n" + deco.prefix)
        return deco.prefix + self.prefix + message + deco.suffix + "\n"

    def _emit(self, level: Level, fmt: object, args: tuple) -> None:
        if self.threshold < level:
            return
        line = self.format_line(level, fmt, args)
        stream = self._stream if self._stream is not None else sys.stdout
        with _WRITE_LOCK:
            try:
                stream.write(line)
                stream.flush()
            except (OSError, ValueError) as exc:
                # stdout gone (closed pipe, closed file): drop the line
                get_logger().warning("dropped log line: %s", exc)

    def fatal(self, fmt: object, *args: Any) -> NoReturn:
        """Raise :class:`Fatal` carrying the composed line. Never filtered."""
        raise Fatal(self.format_line(Level.CRIT, fmt, args))

    def error(self, fmt: object, *args: Any) -> None:
        self._emit(Level.ERROR, fmt, args)

    def warn(self, fmt: object, *args: Any) -> None:
        self._emit(Level.WARN, fmt, args)

    def info(self, fmt: object, *args: Any) -> None:
        self._emit(Level.INFO, fmt, args)

    def debug(self, fmt: object, *args: Any) -> None:
        self._emit(Level.DEBUG, fmt, args)


__all__ = ["Logger", "probe_interactive"]
