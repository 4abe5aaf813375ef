"""Typed audit records and the ``parse`` entry point.

A ``Record`` is a ``RawRecord`` with every field value interpreted:
``uid=0`` becomes ``"root"``, ``cap_pe=...`` a list of capability
names, ``saddr=...`` a socket address dict.  The header values and the
field keys are carried over unchanged.

``parse`` is the single entry point most callers need::

    >>> record = parse('type=USER_ACCT msg=audit(1.000:2): uid=0')
    >>> record.fields["uid"]
    'root'
"""

from dataclasses import dataclass
from typing import Any, Self

from auditd_parser.interpret import FieldType, interpret, resolve
from auditd_parser.logging import Logger, LogLevel
from auditd_parser.parser import ParseError, RawRecord, parse_record, record_to_dict
from auditd_parser.values import FieldValue

LOG_SOURCE_PARSER = "parser"
LOG_SOURCE_INTERPRET = "interpret"

# Interpreters whose result may legitimately equal the raw text.
_IDENTITY_TYPES = frozenset({FieldType.RESULT, FieldType.PAM_GRANTORS})


@dataclass(frozen=True)
class Record:
    """One interpreted audit record.

    Attributes:
        record_type: The ``type=`` value, e.g. ``SYSCALL``.
        timestamp: Event time in milliseconds since the epoch.
        id: Event serial number.
        fields: Interpreted field values keyed by name, sorted by name.
        node: The ``node=`` value, if the line has one.
        enrichment: Interpreted enrichment values, if any.

    """

    record_type: str
    timestamp: int
    id: int
    fields: dict[str, FieldValue]
    node: str | None = None
    enrichment: dict[str, FieldValue] | None = None

    @classmethod
    def from_raw(
        cls,
        raw: RawRecord,
        *,
        logger: Logger | None = None,
        line_number: int | None = None,
    ) -> Self:
        """Interpret every field and enrichment value of *raw*.

        Args:
            raw: The uninterpreted record.
            logger: If given, receives a DEBUG entry for each field whose
                interpreter kept the raw text.
            line_number: Input line number to attach to log entries.

        Returns:
            The interpreted record.

        """
        arch = raw.fields.get("arch")

        def convert(values: dict[str, str]) -> dict[str, FieldValue]:
            converted: dict[str, FieldValue] = {}
            for name, value in values.items():
                result = interpret(raw.record_type, name, value, arch=arch)
                if logger is not None and _degraded(name, value, result):
                    logger.log(
                        LogLevel.DEBUG,
                        f"{raw.record_type}: kept raw value of {name}={value!r}",
                        source=LOG_SOURCE_INTERPRET,
                        line_number=line_number,
                    )
                converted[name] = result
            return converted

        return cls(
            record_type=raw.record_type,
            timestamp=raw.timestamp,
            id=raw.id,
            fields=convert(raw.fields),
            node=raw.node,
            enrichment=None if raw.enrichment is None else convert(raw.enrichment),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict, omitting ``node`` and ``enrichment`` when absent."""
        return record_to_dict(self)


def _degraded(name: str, raw_value: str, result: FieldValue) -> bool:
    field_type = resolve(name)
    if field_type is None or field_type in _IDENTITY_TYPES:
        return False
    return isinstance(result, str) and result == raw_value


def parse(
    line: str,
    *,
    logger: Logger | None = None,
    line_number: int | None = None,
) -> Record:
    """Parse and interpret one audit log line.

    Args:
        line: The record text, without a trailing newline.
        logger: If given, receives an ERROR entry when the line is
            rejected and DEBUG entries for fields kept as raw text.
        line_number: Input line number to attach to log entries.

    Returns:
        The interpreted record.

    Raises:
        ParseError: If the line does not follow the audit log grammar.

    """
    try:
        raw = parse_record(line)
    except ParseError as exc:
        if logger is not None:
            logger.log(LogLevel.ERROR, str(exc), source=LOG_SOURCE_PARSER, line_number=line_number)
        raise
    return Record.from_raw(raw, logger=logger, line_number=line_number)


def parse_to_dict(
    line: str,
    *,
    raw: bool = False,
    max_line_length: int | None = None,
    logger: Logger | None = None,
    line_number: int | None = None,
) -> dict[str, Any]:
    """Parse one line into the JSON-ready output shape.

    This is what the command-line and web front ends call.

    Args:
        line: The record text, without a trailing newline.
        raw: Return the uninterpreted field values.
        max_line_length: If set, longer lines are rejected unparsed.
        logger: If given, receives the entries ``parse`` would log.
        line_number: Input line number to attach to log entries.

    Returns:
        The record as a dict ready for ``json.dumps``.

    Raises:
        ParseError: If the line is too long or not a valid record.

    """
    try:
        if max_line_length is not None and len(line) > max_line_length:
            msg = f"Line is {len(line)} characters long, limit is {max_line_length}"
            raise ParseError(msg)
        if raw:
            return parse_record(line).to_dict()
    except ParseError as exc:
        if logger is not None:
            logger.log(LogLevel.ERROR, str(exc), source=LOG_SOURCE_PARSER, line_number=line_number)
        raise
    return parse(line, logger=logger, line_number=line_number).to_dict()
