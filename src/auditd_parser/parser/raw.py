"""Whole-line parser producing an uninterpreted ``RawRecord``.

``parse_record`` chains the header and body parsers and insists that
together they consume the entire line.  The result holds strings only:
turning ``uid=0`` into ``"root"`` is the interpretation engine's job.
"""

from dataclasses import dataclass
from typing import Any

from auditd_parser.parser.body import parse_body
from auditd_parser.parser.header import parse_header


@dataclass(frozen=True)
class RawRecord:
    """One audit record as text: header values plus raw field strings.

    Attributes:
        record_type: The ``type=`` value, e.g. ``SYSCALL``.
        timestamp: Event time in milliseconds since the epoch.
        id: Event serial number.
        fields: Field values keyed by name, sorted by name.
        node: The ``node=`` value, if the line has one.
        enrichment: Values after the ``0x1D`` separator, if any.

    """

    record_type: str
    timestamp: int
    id: int
    fields: dict[str, str]
    node: str | None = None
    enrichment: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict, omitting ``node`` and ``enrichment`` when absent."""
        return record_to_dict(self)


def record_to_dict(record: Any) -> dict[str, Any]:
    """Return the output shape shared by raw and interpreted records."""
    data: dict[str, Any] = {
        "record_type": record.record_type,
        "timestamp": record.timestamp,
        "id": record.id,
    }
    if record.node is not None:
        data["node"] = record.node
    data["fields"] = dict(record.fields)
    if record.enrichment is not None:
        data["enrichment"] = dict(record.enrichment)
    return data


def parse_record(line: str) -> RawRecord:
    """Parse one audit log line into a ``RawRecord``.

    Args:
        line: The record text, without a trailing newline.

    Returns:
        The raw record.

    Raises:
        ParseError: If any part of the line violates the grammar or
            input is left unconsumed.

    """
    header, pos = parse_header(line)
    fields, enrichment = parse_body(line, pos)
    return RawRecord(
        record_type=header.record_type,
        timestamp=header.timestamp,
        id=header.id,
        fields=fields,
        node=header.node,
        enrichment=enrichment,
    )
