"""Command-line interface for propenv.

- loads one or more properties files (or stdin) into the environment
- optionally prints the parsed records or the environment changes instead
- optionally runs a command with the resulting environment (after ``--``)
"""

from __future__ import annotations
import argparse
import os
import subprocess
import sys

from colorama import Fore, Style

from .environ import EnvironSink, setenv_property
from .errors import LoadError
from .loader import load_files
from .logging_config import get_logger, setup_logging
from .parser import Handler
from .records import RecordCollector, render_record

logger = get_logger(__name__)


def _split_command(argv: list[str]) -> tuple[list[str], list[str]]:
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1:]
    return argv, []


def _error(message: str, color: bool) -> None:
    if color:
        sys.stderr.write(f"{Fore.RED}error:{Style.RESET_ALL} {message}\n")
    else:
        sys.stderr.write(f"error: {message}\n")


def _printable(text: str) -> str:
    # undecodable bytes come back from os.fsdecode as lone surrogates
    return os.fsencode(text).decode("utf-8", "replace")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv, command = _split_command(list(argv))

    p = argparse.ArgumentParser(
        prog="propenv",
        description="Load properties files into environment variables.",
        epilog="Anything after '--' is run as a command with the loaded environment.",
    )
    p.add_argument("paths", nargs="+", metavar="FILE", help="Properties file path or '-' for stdin")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--dump", action="store_true", help="Print parsed records as name=value")
    mode.add_argument("--dry-run", action="store_true", help="Print environment changes without applying them")
    p.add_argument("--no-color", action="store_true", help="Disable colored diagnostics")
    args = p.parse_args(argv)

    if command and args.dump:
        p.error("a command cannot be combined with --dump")

    setup_logging()
    color = not args.no_color and sys.stderr.isatty()

    handler: Handler
    if args.dump:
        handler = RecordCollector()
    elif args.dry_run:
        handler = EnvironSink(environ=dict(os.environ))
    else:
        handler = setenv_property

    try:
        stdin = sys.stdin.buffer if "-" in args.paths else None
        load_files(args.paths, handler, stdin=stdin)
    except LoadError as ex:
        _error(f"{ex.source}: {ex}", color)
        return 1

    if isinstance(handler, RecordCollector):
        for record in handler.records:
            sys.stdout.write(render_record(record) + "\n")
        return 0

    if isinstance(handler, EnvironSink):
        for key, value in handler.operations:
            line = f"unset {key}" if value is None else f"{key}={value}"
            sys.stdout.write(_printable(line) + "\n")
        env = dict(handler.environ)
    else:
        env = dict(os.environ)

    if not command:
        return 0

    logger.info("running %s", command[0])
    try:
        return subprocess.run(command, env=env).returncode
    except OSError as ex:
        _error(f"{command[0]}: {ex.strerror or ex}", color)
        return 127


if __name__ == "__main__":
    raise SystemExit(main())
