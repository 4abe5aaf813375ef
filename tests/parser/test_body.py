"""Tests for the record body grammar.

The body is a blank-separated ``key=value`` list with optional quoting
and an optional ``0x1D``-separated enrichment list.
"""

import pytest

from auditd_parser.parser import (
    ENRICHMENT_SEPARATOR,
    ParseError,
    Token,
    parse_body,
    parse_key_value_list,
    parse_pairs,
    parse_value,
)
from auditd_parser.parser.body import MAX_U64, classify, sorted_mapping

PID = 1234


class TestParseValue:
    """Verify single value tokens."""

    def test_unquoted_stops_at_blank(self) -> None:
        """An unquoted value ends at the first space."""
        token, end = parse_value("abc def", 0)
        assert token == Token("abc")
        assert end == len("abc")

    def test_double_quoted(self) -> None:
        """Quotes are stripped and the content is kept verbatim."""
        token, end = parse_value('"a b=c" x', 0)
        assert token == Token("a b=c", quoted=True)
        assert end == len('"a b=c"')

    def test_single_quoted(self) -> None:
        """Single quotes work the same way."""
        token, _ = parse_value("'op=x res=1'", 0)
        assert token == Token("op=x res=1", quoted=True)

    def test_other_quote_kind_is_content(self) -> None:
        """A double quote inside single quotes is plain content."""
        token, _ = parse_value("'say \"hi\"'", 0)
        assert token.text == 'say "hi"'

    def test_unmatched_quote_reads_unquoted(self) -> None:
        """A quote with no partner is part of an unquoted value."""
        token, _ = parse_value('"abc', 0)
        assert token == Token('"abc')

    def test_empty_quotes(self) -> None:
        """An empty quoted value is allowed."""
        token, _ = parse_value('""', 0)
        assert token == Token("", quoted=True)

    def test_missing_value(self) -> None:
        """Nothing to read is an error."""
        with pytest.raises(ParseError):
            parse_value(" x", 0)


class TestParsePairs:
    """Verify key/value lists."""

    def test_pairs_in_line_order(self) -> None:
        """Pairs come back in the order they appear."""
        pairs, end = parse_pairs("b=2 a=1")
        assert pairs == [("b", Token("2")), ("a", Token("1"))]
        assert end == len("b=2 a=1")

    def test_tabs_and_runs_of_blanks(self) -> None:
        """Any run of spaces and tabs separates pairs."""
        pairs, _ = parse_pairs("a=1 \t  b=2")
        assert [key for key, _ in pairs] == ["a", "b"]

    def test_one_leading_space_skipped(self) -> None:
        """A single leading space is allowed."""
        pairs, _ = parse_pairs(" a=1")
        assert pairs == [("a", Token("1"))]

    def test_two_leading_spaces_rejected(self) -> None:
        """Only one leading space is skipped."""
        with pytest.raises(ParseError):
            parse_pairs("  a=1")

    def test_stops_before_non_pair(self) -> None:
        """The list ends before blanks not followed by a pair."""
        pairs, end = parse_pairs("a=1 junk")
        assert pairs == [("a", Token("1"))]
        assert end == len("a=1")

    def test_value_may_contain_equals(self) -> None:
        """Only the first ``=`` splits key from value."""
        pairs, _ = parse_pairs("a=b=c")
        assert pairs == [("a", Token("b=c"))]

    def test_empty_list_rejected(self) -> None:
        """At least one pair is required."""
        with pytest.raises(ParseError):
            parse_pairs("")

    def test_empty_key_rejected(self) -> None:
        """A pair needs a key."""
        with pytest.raises(ParseError):
            parse_pairs("=value")


class TestClassify:
    """Verify grammar-level typing of values."""

    def test_unquoted_integer(self) -> None:
        """Decimal digits become an int."""
        assert classify(Token("1234")) == PID

    def test_unquoted_integer_overflow(self) -> None:
        """Digits past 64 bits stay a string."""
        text = str(MAX_U64 + 1)
        assert classify(Token(text)) == text

    def test_signed_stays_string(self) -> None:
        """The grammar only knows unsigned integers."""
        assert classify(Token("-1")) == "-1"

    def test_quoted_digits_stay_string(self) -> None:
        """Quoting keeps digits textual."""
        assert classify(Token("1234", quoted=True)) == "1234"

    def test_quoted_list_becomes_dict(self) -> None:
        """A quoted ``key=value`` list becomes a sorted dict."""
        token = Token("op=PAM:accounting acct=\"alice\" res=success", quoted=True)
        assert classify(token) == {"acct": "alice", "op": "PAM:accounting", "res": "success"}

    def test_partial_list_stays_string(self) -> None:
        """A quoted value that is only partly a list stays a string."""
        token = Token("a=1 trailing words", quoted=True)
        assert classify(token) == "a=1 trailing words"


class TestParseKeyValueList:
    """Verify complete typed lists."""

    def test_typed_and_sorted(self) -> None:
        """Values are typed and keys sorted."""
        result = parse_key_value_list("pid=1234 comm=\"sshd\" op=login")
        assert result == {"comm": "sshd", "op": "login", "pid": PID}
        assert list(result) == ["comm", "op", "pid"]

    def test_duplicate_key_keeps_last(self) -> None:
        """A repeated key keeps its last value."""
        assert parse_key_value_list("a=1 a=2") == {"a": 2}

    def test_leftover_input(self) -> None:
        """Unconsumed input is an error."""
        with pytest.raises(ParseError, match="Unexpected input"):
            parse_key_value_list("a=1 junk")


class TestParseBody:
    """Verify the body with and without enrichment."""

    def test_raw_strings(self) -> None:
        """Body values keep their text, quotes removed."""
        fields, enrichment = parse_body('pid=1 exe="/usr/bin/ls"', 0)
        assert fields == {"exe": "/usr/bin/ls", "pid": "1"}
        assert enrichment is None

    def test_enrichment(self) -> None:
        """Pairs after the separator form the enrichment."""
        line = f"uid=0{ENRICHMENT_SEPARATOR}UID=\"root\""
        fields, enrichment = parse_body(line, 0)
        assert fields == {"uid": "0"}
        assert enrichment == {"UID": "root"}

    def test_separator_after_space(self) -> None:
        """The separator is never preceded by a blank."""
        with pytest.raises(ParseError):
            parse_body(f"uid=0 {ENRICHMENT_SEPARATOR}UID=root", 0)

    def test_empty_enrichment(self) -> None:
        """A separator with nothing after it is an error."""
        with pytest.raises(ParseError):
            parse_body(f"uid=0{ENRICHMENT_SEPARATOR}", 0)

    def test_second_separator(self) -> None:
        """Only one enrichment block is allowed."""
        line = f"a=1{ENRICHMENT_SEPARATOR}B=2{ENRICHMENT_SEPARATOR}C=3"
        with pytest.raises(ParseError):
            parse_body(line, 0)

    def test_trailing_space(self) -> None:
        """Trailing blanks are leftover input."""
        with pytest.raises(ParseError):
            parse_body("a=1 ", 0)


class TestSortedMapping:
    """Verify the mapping helper."""

    def test_sorted_and_last_wins(self) -> None:
        """Keys are sorted and later duplicates win."""
        assert sorted_mapping([("b", 1), ("a", 2), ("b", 3)]) == {"a": 2, "b": 3}
