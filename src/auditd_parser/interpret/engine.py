"""Interpretation engine: pick a field's interpreter and run it.

``interpret`` is the only entry point the record assembler needs.  It
checks the null sentinels the kernel and ``auditd`` print for absent
values, resolves the field's type from its name, and dispatches to the
matching interpreter.  Unknown names pass through unchanged.
"""

from collections.abc import Callable

from typing_extensions import TypeAliasType

from auditd_parser.interpret.field_type import FieldType, resolve
from auditd_parser.interpret.interpreters import (
    interpret_arch,
    interpret_capability_bitmap,
    interpret_errno,
    interpret_escaped,
    interpret_exit,
    interpret_grantors,
    interpret_id,
    interpret_list,
    interpret_mac_label,
    interpret_mode,
    interpret_msg,
    interpret_perm,
    interpret_proctitle,
    interpret_result,
    interpret_signal,
    interpret_sockaddr,
    interpret_success,
    interpret_syscall,
)
from auditd_parser.values import FieldValue

NULL_SENTINELS = frozenset({"?", "(none)", "(null)"})

Interpreter = TypeAliasType("Interpreter", Callable[[str], FieldValue])

INTERPRETERS: dict[FieldType, Interpreter] = {
    FieldType.ESCAPED: interpret_escaped,
    FieldType.MSG: interpret_msg,
    FieldType.EXIT: interpret_exit,
    FieldType.UID: interpret_id,
    FieldType.GID: interpret_id,
    FieldType.CAPABILITY_BITMAP: interpret_capability_bitmap,
    FieldType.SOCKET_ADDR: interpret_sockaddr,
    FieldType.PERM: interpret_perm,
    FieldType.RESULT: interpret_result,
    FieldType.PROCTITLE: interpret_proctitle,
    FieldType.MODE: interpret_mode,
    FieldType.SIGNAL: interpret_signal,
    FieldType.LIST: interpret_list,
    FieldType.SUCCESS: interpret_success,
    FieldType.ERRNO: interpret_errno,
    FieldType.MAC_LABEL: interpret_mac_label,
    FieldType.PAM_GRANTORS: interpret_grantors,
    FieldType.ARCH: interpret_arch,
}
"""Interpreters that need nothing but the raw value; SYSCALL is special-cased."""


def interpret(
    record_type: str,  # noqa: ARG001
    field_name: str,
    raw_value: str,
    *,
    arch: str | None = None,
) -> FieldValue:
    """Turn one raw field value into its typed form.

    Args:
        record_type: The record's ``type=`` value; interpretation does
            not currently depend on it.
        field_name: The field's key.
        raw_value: The field's raw text.
        arch: The raw ``arch`` value of the same record, used to name
            syscalls.

    Returns:
        None for a null sentinel, *raw_value* for an unknown field name,
        else the interpreter's result.  Never raises.

    """
    if raw_value in NULL_SENTINELS:
        return None
    field_type = resolve(field_name)
    if field_type is None:
        return raw_value
    if field_type is FieldType.SYSCALL:
        return interpret_syscall(raw_value, arch)
    return INTERPRETERS[field_type](raw_value)
