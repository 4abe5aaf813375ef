"""Field name classification.

The meaning of an audit field depends only on its name: ``uid`` is
always a user id, ``saddr`` always a hex-encoded socket address.  The
name lists follow ``auparse/typetab.h`` of the audit userspace tools,
with ``success`` and ``grantors`` added (auparse leaves them as text).

``resolve`` returns None for names it does not know; those fields are
kept as their raw string.
"""

from enum import StrEnum


class FieldType(StrEnum):
    """Semantic type of a field, used to pick its interpreter."""

    ESCAPED = "escaped"
    MSG = "msg"
    EXIT = "exit"
    UID = "uid"
    GID = "gid"
    CAPABILITY_BITMAP = "capability_bitmap"
    SOCKET_ADDR = "socket_addr"
    PERM = "perm"
    RESULT = "result"
    PROCTITLE = "proctitle"
    MODE = "mode"
    SIGNAL = "signal"
    LIST = "list"
    SUCCESS = "success"
    ERRNO = "errno"
    MAC_LABEL = "mac_label"
    PAM_GRANTORS = "pam_grantors"
    ARCH = "arch"
    SYSCALL = "syscall"


EXACT_NAMES: dict[str, FieldType] = {
    "msg": FieldType.MSG,
    "exit": FieldType.EXIT,
    "saddr": FieldType.SOCKET_ADDR,
    "proctitle": FieldType.PROCTITLE,
    "mode": FieldType.MODE,
    "list": FieldType.LIST,
    "success": FieldType.SUCCESS,
    "errno": FieldType.ERRNO,
    "grantors": FieldType.PAM_GRANTORS,
    "arch": FieldType.ARCH,
    "syscall": FieldType.SYSCALL,
}
"""Field names that map one-to-one to a type."""

ESCAPED_NAMES: frozenset[str] = frozenset(
    {
        "path",
        "comm",
        "exe",
        "file",
        "name",
        "watch",
        "cwd",
        "cmd",
        "acct",
        "dir",
        "key",
        "vm",
        "old-chardev",
        "new-chardev",
        "old-disk",
        "new-disk",
        "old-fs",
        "new-fs",
        "old-net",
        "new-net",
        "device",
        "cgroup",
        "apparmor",
        "operation",
        "denied_mask",
        "info",
        "profile",
        "requested_mask",
        "old-rng",
        "new-rng",
        "ocomm",
        "grp",
        "new_group",
        "invalid_context",
        "sw",
        "root_dir",
    }
)

UID_NAMES: frozenset[str] = frozenset(
    {
        "auid",
        "uid",
        "euid",
        "suid",
        "fsuid",
        "ouid",
        "oauid",
        "old-auid",
        "iuid",
        "id",
        "inode_uid",
        "sauid",
        "obj_uid",
    }
)

GID_NAMES: frozenset[str] = frozenset(
    {"obj_gid", "gid", "egid", "sgid", "fsgid", "ogid", "igid", "inode_gid", "new_gid"}
)

CAPABILITY_BITMAP_NAMES: frozenset[str] = frozenset(
    {
        "cap_pi",
        "cap_pe",
        "cap_pp",
        "cap_pa",
        "cap_fi",
        "cap_fp",
        "fp",
        "fi",
        "old_pp",
        "old_pi",
        "old_pe",
        "old_pa",
        "new_pp",
        "new_pi",
        "new_pe",
        "pp",
        "pi",
        "pe",
        "pa",
    }
)

PERM_NAMES: frozenset[str] = frozenset({"perm", "perm_mask"})

RESULT_NAMES: frozenset[str] = frozenset({"res", "result"})

SIGNAL_NAMES: frozenset[str] = frozenset({"sig", "sigev_signo"})

MAC_LABEL_NAMES: frozenset[str] = frozenset(
    {"subj", "obj", "scontext", "tcontext", "vm-ctx", "img-ctx"}
)

NAME_SETS: tuple[tuple[frozenset[str], FieldType], ...] = (
    (ESCAPED_NAMES, FieldType.ESCAPED),
    (UID_NAMES, FieldType.UID),
    (GID_NAMES, FieldType.GID),
    (CAPABILITY_BITMAP_NAMES, FieldType.CAPABILITY_BITMAP),
    (PERM_NAMES, FieldType.PERM),
    (RESULT_NAMES, FieldType.RESULT),
    (SIGNAL_NAMES, FieldType.SIGNAL),
    (MAC_LABEL_NAMES, FieldType.MAC_LABEL),
)
"""Membership lists, checked in order after the exact names."""


def resolve(field_name: str) -> FieldType | None:
    """Return the type of the field called *field_name*, or None if unknown."""
    field_type = EXACT_NAMES.get(field_name)
    if field_type is not None:
        return field_type
    for names, set_type in NAME_SETS:
        if field_name in names:
            return set_type
    return None
