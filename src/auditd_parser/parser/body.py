"""Record body parser: the ``key=value`` list after the header.

Grammar (blanks are spaces and tabs)::

    body        := pairs [ SEP pairs ]
    pairs       := [" "] pair (blanks pair)*
    pair        := key "=" value
    key         := run of chars other than "=", blanks, SEP
    value       := quoted | unquoted
    quoted      := '"' chars-but-'"' '"'  |  "'" chars-but-"'" "'"
    unquoted    := run of chars other than blanks, SEP

``SEP`` is the ``0x1D`` group separator that ``auditd`` inserts before
its enrichment block (``UID="alice" AUID="alice"``) when
``log_format = ENRICHED``.

Quoted values are taken verbatim, with no escape processing: an
embedded quote of the same kind ends the value, and whatever follows
usually makes the line fail.  The kernel hex-encodes any value that
would need escaping, so this only bites on hand-written lines.

A quoted value may itself hold a ``key=value`` list, as in
``msg='op=PAM:accounting acct="alice" res=success'``.  The grammar
classifies each value into a ``GrammarValue``, trying in order:

1. quoted, and the content parses completely as pairs -> ``dict``;
2. quoted -> the content as ``str``;
3. unquoted, and all decimal digits fitting 64 bits -> ``int``;
4. unquoted -> the token as ``str``.

A list stops at the first blank run not followed by a valid pair; the
blanks are left unconsumed and the caller decides whether leftover
input is an error.
"""

import re
from dataclasses import dataclass
from typing import TypeVar

from auditd_parser.parser.errors import ParseError
from auditd_parser.parser.header import MAX_U64
from auditd_parser.values import GrammarValue

ENRICHMENT_SEPARATOR = "\x1d"
QUOTES = ('"', "'")

_BLANKS_RE = re.compile(r"[ \t]+")
_KEY_RE = re.compile(r"[^= \t\x1d]+(?==)")
_UNQUOTED_RE = re.compile(r"[^ \t\x1d]+")
_INTEGER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Token:
    """A value as it appears on the line, without its quotes."""

    text: str
    quoted: bool = False


def parse_value(text: str, pos: int) -> tuple[Token, int]:
    """Parse a quoted or unquoted value starting at *pos*.

    A quote with no matching closing quote is not an error: the value
    is then read as unquoted, quote character included.

    Returns:
        The value token and the offset after it.

    Raises:
        ParseError: If no value starts at *pos*.

    """
    if pos < len(text) and text[pos] in QUOTES:
        end = text.find(text[pos], pos + 1)
        if end != -1:
            return Token(text[pos + 1 : end], quoted=True), end + 1
    match = _UNQUOTED_RE.match(text, pos)
    if match is None:
        msg = f"Expected a value at offset {pos}"
        raise ParseError(msg)
    return Token(match.group()), match.end()


def _parse_pair(text: str, pos: int) -> tuple[str, Token, int]:
    match = _KEY_RE.match(text, pos)
    if match is None:
        msg = f"Expected a key followed by '=' at offset {pos}"
        raise ParseError(msg)
    token, end = parse_value(text, match.end() + 1)
    return match.group(), token, end


def parse_pairs(text: str, pos: int = 0) -> tuple[list[tuple[str, Token]], int]:
    """Parse a blank-separated list of at least one ``key=value`` pair.

    One leading space is skipped: some record types (``SYSTEM_SHUTDOWN``
    and other userspace messages) start their ``msg`` list with it.

    Returns:
        The pairs in line order and the offset where the list ended.

    Raises:
        ParseError: If not even one pair can be parsed.

    """
    if text.startswith(" ", pos):
        pos += 1
    key, token, pos = _parse_pair(text, pos)
    pairs = [(key, token)]
    while (blanks := _BLANKS_RE.match(text, pos)) is not None:
        try:
            key, token, end = _parse_pair(text, blanks.end())
        except ParseError:
            break
        pairs.append((key, token))
        pos = end
    return pairs, pos


V = TypeVar("V")


def sorted_mapping(pairs: list[tuple[str, V]]) -> dict[str, V]:
    """Build a key-sorted dict; a repeated key keeps its last value."""
    return dict(sorted(dict(pairs).items()))


def classify(token: Token) -> GrammarValue:
    """Return the grammar-level value of *token*."""
    if token.quoted:
        try:
            return parse_key_value_list(token.text)
        except ParseError:
            return token.text
    if _INTEGER_RE.fullmatch(token.text):
        value = int(token.text)
        if value <= MAX_U64:
            return value
    return token.text


def parse_key_value_list(text: str) -> dict[str, GrammarValue]:
    """Parse *text* completely as a ``key=value`` list with typed values.

    Raises:
        ParseError: If *text* is not entirely a valid list.

    """
    pairs, pos = parse_pairs(text)
    if pos != len(text):
        msg = f"Unexpected input at offset {pos}: {text[pos:]!r}"
        raise ParseError(msg)
    return sorted_mapping([(key, classify(token)) for key, token in pairs])


def parse_body(line: str, pos: int) -> tuple[dict[str, str], dict[str, str] | None]:
    """Parse the record body from *pos* to the end of *line*.

    Values are returned as their raw text; interpretation happens later.

    Returns:
        The sorted fields and the sorted enrichment (None if absent).

    Raises:
        ParseError: If either list is invalid or input is left over.

    """
    pairs, pos = parse_pairs(line, pos)
    fields = sorted_mapping([(key, token.text) for key, token in pairs])

    enrichment = None
    if line.startswith(ENRICHMENT_SEPARATOR, pos):
        extra, pos = parse_pairs(line, pos + len(ENRICHMENT_SEPARATOR))
        enrichment = sorted_mapping([(key, token.text) for key, token in extra])

    if pos != len(line):
        msg = f"Unexpected input at offset {pos}: {line[pos:]!r}"
        raise ParseError(msg)
    return fields, enrichment
