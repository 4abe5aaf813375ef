"""Socket address decoder.

``SOCKADDR`` records dump the raw ``struct sockaddr`` a process passed
to ``connect``, ``bind``, ``sendto`` and friends, hex-encoded
(``saddr=02000050A9FEA9FE...``).  Decoding means replaying the C memory
layout byte by byte.

Every layout starts with ``sa_family_t``, a 16-bit integer.  Its byte
order is the host's; we assume little-endian, the byte order of both
supported architectures.  The rest depends on the family:

- **AF_LOCAL** (``sockaddr_un``): a NUL-terminated path.
- **AF_INET** (``sockaddr_in``): big-endian port, big-endian IPv4
  address.  Padding after the address is ignored.
- **AF_INET6** (``sockaddr_in6``): big-endian port, big-endian flow
  info, 16-byte address, little-endian scope id.
- **AF_NETLINK** (``sockaddr_nl``): 2 bytes of padding, then the port id
  and multicast group mask, both host (little-endian) order.

Anything else, or a buffer too short for its family, raises
``SockaddrError``; the field interpreter then keeps the hex string.
"""

import struct
from collections.abc import Callable
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address

from auditd_parser.values import FieldValue

_FAMILY = struct.Struct("<H")
_INET = struct.Struct(">H4s")
_INET6 = struct.Struct(">HI16s")
_SCOPE_ID = struct.Struct("<I")
_NETLINK = struct.Struct("<2xII")


class SockaddrError(ValueError):
    """Raised when a buffer cannot be decoded as a socket address."""


class SocketFamily(IntEnum):
    """Address families with a known layout."""

    AF_LOCAL = 1
    AF_INET = 2
    AF_INET6 = 10
    AF_NETLINK = 16


def _require(data: bytes, size: int, family: SocketFamily) -> None:
    if len(data) < size:
        msg = f"{family.name} needs {size} bytes, got {len(data)}"
        raise SockaddrError(msg)


def _decode_local(data: bytes) -> dict[str, FieldValue]:
    path, _, _ = data.partition(b"\x00")
    return {"family": SocketFamily.AF_LOCAL.name, "path": path.decode("utf-8", errors="replace")}


def _decode_inet(data: bytes) -> dict[str, FieldValue]:
    _require(data, _INET.size, SocketFamily.AF_INET)
    port, address = _INET.unpack_from(data)
    return {"family": SocketFamily.AF_INET.name, "address": f"{IPv4Address(address)}:{port}"}


def _decode_inet6(data: bytes) -> dict[str, FieldValue]:
    _require(data, _INET6.size + _SCOPE_ID.size, SocketFamily.AF_INET6)
    port, flow_info, address = _INET6.unpack_from(data)
    (scope_id,) = _SCOPE_ID.unpack_from(data, _INET6.size)
    return {
        "family": SocketFamily.AF_INET6.name,
        "address": f"[{IPv6Address(address)}]:{port}",
        "flow_info": flow_info,
        "scope_id": scope_id,
    }


def _decode_netlink(data: bytes) -> dict[str, FieldValue]:
    _require(data, _NETLINK.size, SocketFamily.AF_NETLINK)
    pid, groups = _NETLINK.unpack_from(data)
    return {"family": SocketFamily.AF_NETLINK.name, "pid": pid, "groups": groups}


_DECODERS: dict[SocketFamily, Callable[[bytes], dict[str, FieldValue]]] = {
    SocketFamily.AF_LOCAL: _decode_local,
    SocketFamily.AF_INET: _decode_inet,
    SocketFamily.AF_INET6: _decode_inet6,
    SocketFamily.AF_NETLINK: _decode_netlink,
}


def decode_sockaddr(data: bytes) -> dict[str, FieldValue]:
    """Decode a raw ``struct sockaddr`` buffer.

    Args:
        data: The struct bytes, family first.

    Returns:
        A map with a ``family`` entry plus family-specific entries.

    Raises:
        SockaddrError: If the family is unknown or the buffer is short.

    """
    if len(data) < _FAMILY.size:
        msg = f"Socket address needs {_FAMILY.size} bytes, got {len(data)}"
        raise SockaddrError(msg)
    (family_number,) = _FAMILY.unpack_from(data)
    try:
        family = SocketFamily(family_number)
    except ValueError:
        msg = f"Unknown socket family {family_number}"
        raise SockaddrError(msg) from None
    return _DECODERS[family](data[_FAMILY.size :])
