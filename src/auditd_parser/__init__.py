"""Parse Linux audit log lines into typed records.

Re-exports the public entry points so callers can write::

    from auditd_parser import ParseError, parse

    record = parse(line)
    record.fields["uid"]  # "root", an int, or None when unset
"""

from auditd_parser.interpret import FieldType, interpret, resolve
from auditd_parser.parser import ParseError, RawRecord, parse_record
from auditd_parser.record import Record, parse, parse_to_dict
from auditd_parser.values import FieldValue, GrammarValue

__all__ = [
    "FieldType",
    "FieldValue",
    "GrammarValue",
    "ParseError",
    "RawRecord",
    "Record",
    "interpret",
    "parse",
    "parse_record",
    "parse_to_dict",
    "resolve",
]
