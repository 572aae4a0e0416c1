"""Command-line front door for lazylauncher.

Parses CLI options, merges them with persisted config, and either prints the
ranked list (``--list``) or runs the interactive launcher.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .app import list_matches, run_launcher
from .paths import application_dirs
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Send package logs to ``log_file``; the terminal itself stays clean."""
    package_logger = logging.getLogger("lazylauncher")
    if log_file is None:
        package_logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazylauncher",
        description="Fuzzy-find an installed application and launch it.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        nargs="?",
        const="",
        default=None,
        metavar="QUERY",
        help="Print ranked applications matching QUERY and exit.",
    )
    parser.add_argument(
        "--dir",
        dest="dirs",
        action="append",
        type=Path,
        default=[],
        metavar="PATH",
        help="Additional directory to scan (repeatable).",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=None,
        help="Entries ingested per redraw (default: config or 60).",
    )
    parser.add_argument(
        "--key-by-path",
        action="store_true",
        help="Keep applications sharing a name and comment as separate entries.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the requested mode and exit with its status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    roots = application_dirs(extra_dirs=[*config.load_extra_dirs(), *args.dirs])
    key_by_path = args.key_by_path or config.load_key_by_path()

    if args.list is not None:
        for match in list_matches(roots, args.list, key_by_path=key_by_path):
            sys.stdout.write(f"{match.score}:{match.entry.display_name}\n")
        return

    if not sys.stdin.isatty():
        raise SystemExit("lazylauncher needs an interactive terminal; use --list for plain output.")

    if args.theme:
        config.save_theme_name(normalize_theme_name(args.theme))
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    batch_size = args.batch_size if args.batch_size is not None else config.load_batch_size()
    exit_code = run_launcher(roots, theme, batch_size=batch_size, key_by_path=key_by_path)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
