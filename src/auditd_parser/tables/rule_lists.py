"""Audit rule filter lists.

``CONFIG_CHANGE`` records report which filter list a rule was added to
or removed from as ``list=<n>``.  The numbers are the ``AUDIT_FILTER_*``
constants of ``include/uapi/linux/audit.h``; the names are the ones
``auditctl -l`` prints.
"""

from enum import IntEnum


class RuleList(IntEnum):
    """Filter lists a rule can belong to."""

    USER = 0
    TASK = 1
    ENTRY = 2
    WATCH = 3
    EXIT = 4
    EXCLUDE = 5
    FILESYSTEM = 6
    IO_URING_EXIT = 7

    @property
    def label(self) -> str:
        """Return the name as printed by the audit tools."""
        return self.name.lower().replace("_", "-")


def resolve_rule_list(number: int) -> RuleList | None:
    """Return the filter list for *number*, or None if out of range."""
    try:
        return RuleList(number)
    except ValueError:
        return None
