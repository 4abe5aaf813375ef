"""Field interpretation: name-based type resolution and typed decoding.

Re-exports public symbols so callers can write::

    from auditd_parser.interpret import FieldType, interpret, resolve
"""

from auditd_parser.interpret.engine import INTERPRETERS, NULL_SENTINELS, interpret
from auditd_parser.interpret.field_type import FieldType, resolve

__all__ = [
    "INTERPRETERS",
    "NULL_SENTINELS",
    "FieldType",
    "interpret",
    "resolve",
]
