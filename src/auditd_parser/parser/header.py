"""Record header parser.

Every audit record starts with the same header::

    [node=<TOKEN> ]type=<TOKEN> msg=audit(<secs>.<millis>:<id>):

- ``node`` is present only when ``auditd`` runs with ``name_format``
  set, typically on aggregating servers.
- ``<secs>.<millis>`` is the event time.  The kernel always prints
  exactly three millisecond digits; fewer is a parse error, and extra
  digits are left in place, so the header then fails on the ``:``.
- ``<id>`` is the event serial number.  Records sharing a timestamp and
  id belong to the same event.

The parser works on a line plus a starting offset and returns the offset
just after the header, so the body parser can take over from there.
"""

import re
from dataclasses import dataclass

from auditd_parser.parser.errors import ParseError

_TOKEN_RE = re.compile(r"\S+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_MILLIS_RE = re.compile(r"[0-9]{3}")

MAX_U64 = 2**64 - 1
MILLIS_PER_SECOND = 1000


@dataclass(frozen=True)
class Header:
    """The parsed header of one record."""

    record_type: str
    timestamp: int
    """Event time in milliseconds since the epoch."""

    id: int
    """Event serial number."""

    node: str | None = None


def expect(line: str, pos: int, literal: str) -> int:
    """Consume *literal* at *pos* and return the offset after it.

    Raises:
        ParseError: If *literal* is not at *pos*.

    """
    if not line.startswith(literal, pos):
        msg = f"Expected {literal!r} at offset {pos}"
        raise ParseError(msg)
    return pos + len(literal)


def _token(line: str, pos: int, what: str) -> tuple[str, int]:
    match = _TOKEN_RE.match(line, pos)
    if match is None:
        msg = f"Expected {what} at offset {pos}"
        raise ParseError(msg)
    return match.group(), match.end()


def _unsigned(line: str, pos: int, what: str) -> tuple[int, int]:
    match = _UNSIGNED_RE.match(line, pos)
    if match is None:
        msg = f"Expected {what} at offset {pos}"
        raise ParseError(msg)
    value = int(match.group())
    if value > MAX_U64:
        msg = f"{what.capitalize()} at offset {pos} does not fit in 64 bits"
        raise ParseError(msg)
    return value, match.end()


def _timestamp(line: str, pos: int) -> tuple[int, int]:
    seconds, pos = _unsigned(line, pos, "timestamp seconds")
    pos = expect(line, pos, ".")
    match = _MILLIS_RE.match(line, pos)
    if match is None:
        msg = f"Expected 3 millisecond digits at offset {pos}"
        raise ParseError(msg)
    return seconds * MILLIS_PER_SECOND + int(match.group()), match.end()


def parse_header(line: str) -> tuple[Header, int]:
    """Parse the header at the start of *line*.

    Args:
        line: A complete audit record line.

    Returns:
        The header and the offset where the body starts.

    Raises:
        ParseError: If the line does not start with a valid header.

    """
    pos = 0
    node = None
    if line.startswith("node="):
        node, pos = _token(line, len("node="), "node name")
        pos = expect(line, pos, " ")

    pos = expect(line, pos, "type=")
    record_type, pos = _token(line, pos, "record type")
    pos = expect(line, pos, " ")

    pos = expect(line, pos, "msg=audit(")
    timestamp, pos = _timestamp(line, pos)
    pos = expect(line, pos, ":")
    record_id, pos = _unsigned(line, pos, "record id")
    pos = expect(line, pos, "): ")

    return Header(record_type=record_type, timestamp=timestamp, id=record_id, node=node), pos
