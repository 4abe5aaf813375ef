"""Bit-position and bit-flag decoders.

Two kernel values are plain bitmasks:

**Capability sets** (``cap_pe``, ``cap_fp``, ...) are 64-bit masks where
    bit *n* means capability *n* is present.

**Watch permissions** (``perm``, ``perm_mask``) are 4-bit
    ``AUDIT_PERM_*`` masks.  A value of zero is the kernel's way of
    saying "every permission", so it decodes as if all four bits were
    set.

Both decoders are pure integer-to-list functions.
"""

from enum import IntFlag

from auditd_parser.tables.capabilities import capability_name

CAPABILITY_BITS = 64


class AuditPerm(IntFlag):
    """``AUDIT_PERM_*`` flags, declared in output order."""

    EXEC = 0b0001
    WRITE = 0b0010
    READ = 0b0100
    ATTR = 0b1000


ALL_PERMS = AuditPerm.EXEC | AuditPerm.WRITE | AuditPerm.READ | AuditPerm.ATTR


def decode_capabilities(bitmap: int) -> list[str]:
    """Return the capability names set in a 64-bit *bitmap*, lowest bit first."""
    return [capability_name(bit) for bit in range(CAPABILITY_BITS) if (bitmap >> bit) & 1]


def decode_perm_mask(mask: int) -> list[str]:
    """Return the permission names set in *mask*.

    Bits outside the four ``AUDIT_PERM_*`` flags are ignored.

    Returns:
        Names in the fixed order exec, write, read, attr.

    """
    if mask == 0:
        mask = ALL_PERMS
    return [perm.name.lower() for perm in AuditPerm if mask & perm]
