import argparse
import sys
from typing import Dict, List

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import DECORATIONS, Mode
from .errors import Fatal, NanologError, UnknownLevelName
from .levels import LEVEL_NAMES, Level
from .logger import Logger

# "fatal" and "crit" both end in Logger.fatal
EMIT_LEVELS: Dict[str, str] = {
    "fatal": "fatal",
    "crit": "fatal",
    "error": "error",
    "warn": "warn",
    "info": "info",
    "debug": "debug",
}


def _build_logger(args: argparse.Namespace) -> Logger:
    logger = Logger(args.prefix or "", 0)
    if args.filter:
        logger.set_threshold_by_name(args.filter)
    return logger


def cmd_emit(args: argparse.Namespace) -> int:
    try:
        logger = _build_logger(args)
    except UnknownLevelName as exc:
        print(f"[nanolog] {exc}; expected one of {', '.join(LEVEL_NAMES)}", file=sys.stderr)
        return 2
    except NanologError as exc:
        print(f"[nanolog] {exc}", file=sys.stderr)
        return 2
    message = " ".join(args.message)
    method = getattr(logger, EMIT_LEVELS[args.level])
    try:
        # no args: the message is never %-interpolated
        method(message)
    except Fatal as fatal:
        sys.stdout.write(fatal.line)
        sys.stdout.flush()
        return 1
    return 0


def cmd_probe(args: argparse.Namespace) -> int:
    try:
        logger = Logger("", 0)
    except NanologError as exc:
        print(f"[nanolog] {exc}", file=sys.stderr)
        return 2
    print(f"{logger.mode.value} threshold={Level(logger.threshold).label}")
    return 0


def _escape(text: str) -> str:
    return text.encode("unicode_escape").decode("ascii") if text else "(none)"


def _level_rows() -> List[List[str]]:
    rows = []
    for level in Level:
        name = "fatal" if level is Level.CRIT else level.label
        interactive = DECORATIONS[Mode.INTERACTIVE][level]
        daemon = DECORATIONS[Mode.DAEMON][level]
        rows.append(
            [
                name,
                str(int(level)),
                _escape(interactive.prefix),
                _escape(interactive.suffix),
                _escape(daemon.prefix),
                _escape(daemon.suffix),
            ]
        )
    return rows


def cmd_levels(args: argparse.Namespace) -> int:
    headers = ["level", "rank", "tty prefix", "tty suffix", "daemon prefix", "daemon suffix"]
    rows = _level_rows()
    if args.no_color:
        print("\t".join(headers))
        for row in rows:
            print("\t".join(row))
        return 0
    table = Table(title=f"nanolog {__version__}")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    Console().print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nanolog",
        description="Emit leveled log lines with terminal colour or syslog priority prefixes",
    )
    parser.add_argument("--version", action="version", version=f"nanolog {__version__}")
    sub = parser.add_subparsers(dest="cmd")

    emit_parser = sub.add_parser("emit", help="Write one log line at the given level")
    emit_parser.add_argument("level", choices=sorted(EMIT_LEVELS))
    emit_parser.add_argument("message", nargs="+", help="Message words (joined with spaces)")
    emit_parser.add_argument("--prefix", help="Text placed before the message, e.g. '[backup] '")
    emit_parser.add_argument("--filter", help=f"Threshold by name: {', '.join(LEVEL_NAMES)}")
    emit_parser.set_defaults(func=cmd_emit)

    probe_parser = sub.add_parser("probe", help="Report whether stdout is a terminal or captured")
    probe_parser.set_defaults(func=cmd_probe)

    levels_parser = sub.add_parser("levels", help="Show ranks and decorations for every level")
    levels_parser.add_argument("--no-color", action="store_true", help="Plain tab-separated output")
    levels_parser.set_defaults(func=cmd_levels)

    version_parser = sub.add_parser("version", help="Show version and exit")
    version_parser.set_defaults(func=lambda _: (print(f"nanolog {__version__}"), 0)[1])

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    if not getattr(args, "cmd", None):  # No subcommand provided
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
