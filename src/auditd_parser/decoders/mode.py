"""File mode decoder.

``PATH`` and ``CONFIG_CHANGE`` records print an inode's ``st_mode`` in
octal (``mode=0100644``).  The value packs four things into one
integer (``include/uapi/linux/stat.h``)::

    bits 12-15  file type       0170000
    bits  9-11  attributes      0007000   setuid, setgid, sticky
    bits  6-8   user perms      0000700   read, write, exec
    bits  3-5   group perms     0000070
    bits  0-2   other perms     0000007

``parse_mode`` validates the octal text; ``decode_mode`` does the bit
arithmetic on an already-parsed integer.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from auditd_parser.values import FieldValue

FILE_TYPE_MASK = 0o170000
ATTRIBUTES_MASK = 0o7000
USER_MASK = 0o700
GROUP_MASK = 0o70
OTHER_MASK = 0o7

MAX_MODE = 0xFFFF_FFFF

_OCTAL_RE = re.compile(r"[0-7]+")


class ModeError(ValueError):
    """Raised when a mode string is not a valid 32-bit octal number."""


class FileType(StrEnum):
    """The file type nibble of a mode."""

    SOCKET = "socket"
    SYMLINK = "symlink"
    REGULAR_FILE = "regular-file"
    BLOCK_DEVICE = "block-device"
    DIRECTORY = "directory"
    CHAR_DEVICE = "char-device"
    FIFO = "fifo"
    UNKNOWN = "unknown"


class Attribute(StrEnum):
    """Special mode bits, in output order."""

    STICKY = "sticky"
    SETGID = "setgid"
    SETUID = "setuid"


class Permission(StrEnum):
    """Permission bits of one class (user, group, or other), in output order."""

    READ = "read"
    WRITE = "write"
    EXEC = "exec"


FILE_TYPES: dict[int, FileType] = {
    0o14: FileType.SOCKET,
    0o12: FileType.SYMLINK,
    0o10: FileType.REGULAR_FILE,
    0o06: FileType.BLOCK_DEVICE,
    0o04: FileType.DIRECTORY,
    0o02: FileType.CHAR_DEVICE,
    0o01: FileType.FIFO,
}
"""Map the shifted file type nibble to a file type."""

_ATTRIBUTE_BITS: tuple[tuple[int, Attribute], ...] = (
    (0o1, Attribute.STICKY),
    (0o2, Attribute.SETGID),
    (0o4, Attribute.SETUID),
)

_PERMISSION_BITS: tuple[tuple[int, Permission], ...] = (
    (0o4, Permission.READ),
    (0o2, Permission.WRITE),
    (0o1, Permission.EXEC),
)


@dataclass(frozen=True)
class FileMode:
    """A decoded ``st_mode`` value."""

    file_type: FileType
    attributes: tuple[Attribute, ...]
    user: tuple[Permission, ...]
    group: tuple[Permission, ...]
    other: tuple[Permission, ...]

    def to_dict(self) -> dict[str, FieldValue]:
        """Return the mode as a field value map."""
        return {
            "file_type": str(self.file_type),
            "attributes": [str(a) for a in self.attributes],
            "user": [str(p) for p in self.user],
            "group": [str(p) for p in self.group],
            "other": [str(p) for p in self.other],
        }


def _permissions(bits: int) -> tuple[Permission, ...]:
    return tuple(perm for mask, perm in _PERMISSION_BITS if bits & mask)


def decode_mode(mode: int) -> FileMode:
    """Split a numeric mode into its file type, attributes, and permissions."""
    attributes = (mode & ATTRIBUTES_MASK) >> 9
    return FileMode(
        file_type=FILE_TYPES.get((mode & FILE_TYPE_MASK) >> 12, FileType.UNKNOWN),
        attributes=tuple(attr for mask, attr in _ATTRIBUTE_BITS if attributes & mask),
        user=_permissions((mode & USER_MASK) >> 6),
        group=_permissions((mode & GROUP_MASK) >> 3),
        other=_permissions(mode & OTHER_MASK),
    )


def parse_mode(text: str) -> FileMode:
    """Decode an octal mode string.

    Args:
        text: Octal digits as printed by the kernel, e.g. ``0100644``.

    Returns:
        The decoded mode.

    Raises:
        ModeError: If *text* is empty, not octal, or wider than 32 bits.

    """
    if not _OCTAL_RE.fullmatch(text):
        msg = f"Invalid octal mode {text!r}"
        raise ModeError(msg)
    mode = int(text, 8)
    if mode > MAX_MODE:
        msg = f"Mode {text!r} does not fit in 32 bits"
        raise ModeError(msg)
    return decode_mode(mode)
