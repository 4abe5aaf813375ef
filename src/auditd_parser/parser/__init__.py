"""Grammar parser: header, body, and the whole-line entry point.

Re-exports public symbols so callers can write::

    from auditd_parser.parser import ParseError, parse_record
"""

from auditd_parser.parser.body import (
    ENRICHMENT_SEPARATOR,
    Token,
    parse_body,
    parse_key_value_list,
    parse_pairs,
    parse_value,
)
from auditd_parser.parser.errors import ParseError
from auditd_parser.parser.header import Header, parse_header
from auditd_parser.parser.raw import RawRecord, parse_record, record_to_dict

__all__ = [
    "ENRICHMENT_SEPARATOR",
    "Header",
    "ParseError",
    "RawRecord",
    "Token",
    "parse_body",
    "parse_header",
    "parse_key_value_list",
    "parse_pairs",
    "parse_record",
    "parse_value",
    "record_to_dict",
]
