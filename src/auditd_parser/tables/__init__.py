"""Static lookup tables for kernel-encoded values.

Re-exports public symbols so callers can write::

    from auditd_parser.tables import Signal, resolve_errno
"""

from auditd_parser.tables.arch import ARCHITECTURES, resolve_arch
from auditd_parser.tables.capabilities import CAPABILITIES, UNKNOWN_CAPABILITY, capability_name
from auditd_parser.tables.errno import ERRNO_NAMES, resolve_errno
from auditd_parser.tables.rule_lists import RuleList, resolve_rule_list
from auditd_parser.tables.signals import Signal, resolve_signal
from auditd_parser.tables.syscalls import resolve_syscall, syscall_table

__all__ = [
    "ARCHITECTURES",
    "CAPABILITIES",
    "ERRNO_NAMES",
    "UNKNOWN_CAPABILITY",
    "RuleList",
    "Signal",
    "capability_name",
    "resolve_arch",
    "resolve_errno",
    "resolve_rule_list",
    "resolve_signal",
    "resolve_syscall",
    "syscall_table",
]
