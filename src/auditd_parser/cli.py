"""Command-line front end: audit log lines in, JSON out.

Two modes:

1. **Single line** (no arguments): read one line from stdin and print
   the record, or ``{"error": ...}``, as indented JSON.
2. **Stream** (file arguments, or ``--all`` for stdin): parse every
   line, skipping blank lines and ``#`` comments, and print one compact
   JSON object per record.  Rejected lines are reported on stderr.

The exit status is 0 when every line parsed and 1 otherwise.

The helpers (``build_parser``, ``iter_lines``, ``convert_stream``) are
pure and testable.  ``main`` is the I/O wrapper; ``run`` is the
``auditd-parser`` console entry point.
"""

import argparse
import json
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from auditd_parser.config import get_settings
from auditd_parser.logging import Logger, LogLevel
from auditd_parser.parser import ParseError
from auditd_parser.record import parse_to_dict

COMMENT_PREFIX = "#"
STDIN_NAME = "<stdin>"
LOG_SOURCE_CLI = "cli"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``auditd-parser``."""
    parser = argparse.ArgumentParser(
        prog="auditd-parser",
        description="Parse Linux audit log lines into typed JSON records.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Audit log files to parse, one JSON object per line of output",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Parse every line of stdin instead of only the first",
    )
    parser.add_argument(
        "--raw",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep field values as text (default from AUDITD_PARSER_RAW)",
    )
    return parser


def iter_lines(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for each record line of *stream*.

    Line endings are stripped; blank lines and ``#`` comments are
    skipped but still counted.
    """
    for number, line in enumerate(stream, start=1):
        text = line.rstrip("\r\n")
        if not text.strip() or text.startswith(COMMENT_PREFIX):
            continue
        yield number, text


def convert_stream(
    stream: Iterable[str],
    out: TextIO,
    *,
    raw: bool,
    max_line_length: int,
    logger: Logger,
) -> int:
    """Write one JSON object per parsed line of *stream* to *out*.

    Returns:
        The number of rejected lines.

    """
    failures = 0
    for number, line in iter_lines(stream):
        try:
            record = parse_to_dict(
                line,
                raw=raw,
                max_line_length=max_line_length,
                logger=logger,
                line_number=number,
            )
        except ParseError:
            failures += 1
            continue
        out.write(json.dumps(record, ensure_ascii=False) + "\n")
    return failures


def _report(logger: Logger, name: str, err: TextIO) -> None:
    for entry in logger.filter(min_level=LogLevel.ERROR):
        err.write(f"{name}: {entry}\n")
    logger.clear()


def _single_line(raw: bool, max_line_length: int, indent: int) -> int:
    line = sys.stdin.readline().rstrip("\r\n")
    try:
        result = parse_to_dict(line, raw=raw, max_line_length=max_line_length)
    except ParseError as exc:
        result = {"error": str(exc)}
        status = 1
    else:
        status = 0
    sys.stdout.write(json.dumps(result, indent=indent, ensure_ascii=False) + "\n")
    return status


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status.

    Args:
        argv: Arguments without the program name; defaults to
            ``sys.argv[1:]``.

    Returns:
        0 if every line parsed, else 1.

    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    raw = settings.raw if args.raw is None else args.raw

    if not args.files and not args.all:
        return _single_line(raw, settings.max_line_length, settings.indent)

    logger = Logger()
    failures = 0
    if not args.files:
        failures += convert_stream(
            sys.stdin,
            sys.stdout,
            raw=raw,
            max_line_length=settings.max_line_length,
            logger=logger,
        )
        _report(logger, STDIN_NAME, sys.stderr)

    for path in args.files:
        try:
            with path.open(encoding="utf-8", errors="replace") as stream:
                failures += convert_stream(
                    stream,
                    sys.stdout,
                    raw=raw,
                    max_line_length=settings.max_line_length,
                    logger=logger,
                )
        except OSError as exc:
            logger.log(LogLevel.ERROR, f"Cannot read file: {exc.strerror}", source=LOG_SOURCE_CLI)
            failures += 1
        _report(logger, str(path), sys.stderr)

    return 1 if failures else 0


def run() -> None:
    """Console entry point for ``auditd-parser``."""
    raise SystemExit(main())
