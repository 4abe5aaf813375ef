"""Binary struct decoders: socket addresses, file modes, and bitmasks.

Re-exports public symbols so callers can write::

    from auditd_parser.decoders import decode_sockaddr, parse_mode
"""

from auditd_parser.decoders.bitmaps import AuditPerm, decode_capabilities, decode_perm_mask
from auditd_parser.decoders.mode import (
    Attribute,
    FileMode,
    FileType,
    ModeError,
    Permission,
    decode_mode,
    parse_mode,
)
from auditd_parser.decoders.sockaddr import SockaddrError, SocketFamily, decode_sockaddr

__all__ = [
    "Attribute",
    "AuditPerm",
    "FileMode",
    "FileType",
    "ModeError",
    "Permission",
    "SockaddrError",
    "SocketFamily",
    "decode_capabilities",
    "decode_mode",
    "decode_perm_mask",
    "decode_sockaddr",
    "parse_mode",
]
