"""Tests for the ``struct sockaddr`` decoder.

The family is little-endian; ports and IPv4/IPv6 addresses are
big-endian (network order); netlink ids and the IPv6 scope id are
little-endian.
"""

import pytest

from auditd_parser.decoders import SockaddrError, decode_sockaddr

NETLINK_PID = 1234
NETLINK_GROUPS = 5
SCOPE_ID = 2
FLOW_INFO = 0x12345


class TestInet:
    """Verify AF_INET decoding."""

    def test_metadata_service_address(self) -> None:
        """Port 80 on 169.254.169.254."""
        data = bytes.fromhex("02000050A9FEA9FE")
        assert decode_sockaddr(data) == {"family": "AF_INET", "address": "169.254.169.254:80"}

    def test_trailing_padding_ignored(self) -> None:
        """The kernel logs the 8 zero bytes of ``sin_zero``."""
        data = bytes.fromhex("0200003501020304" + "00" * 8)
        assert decode_sockaddr(data)["address"] == "1.2.3.4:53"

    def test_short_buffer(self) -> None:
        """Fewer than 6 bytes after the family should fail."""
        with pytest.raises(SockaddrError):
            decode_sockaddr(bytes.fromhex("02000050A9"))


class TestInet6:
    """Verify AF_INET6 decoding."""

    def test_loopback(self) -> None:
        """Port, flow info, address, and scope id are all decoded."""
        data = (
            bytes.fromhex("0A00")
            + (443).to_bytes(2, "big")
            + FLOW_INFO.to_bytes(4, "big")
            + bytes(15)
            + b"\x01"
            + SCOPE_ID.to_bytes(4, "little")
        )
        assert decode_sockaddr(data) == {
            "family": "AF_INET6",
            "address": "[::1]:443",
            "flow_info": FLOW_INFO,
            "scope_id": SCOPE_ID,
        }

    def test_short_buffer(self) -> None:
        """A buffer missing the scope id should fail."""
        data = bytes.fromhex("0A00") + bytes(22)
        with pytest.raises(SockaddrError):
            decode_sockaddr(data)


class TestLocal:
    """Verify AF_LOCAL decoding."""

    def test_path_ends_at_nul(self) -> None:
        """The path stops at the first NUL byte."""
        data = b"\x01\x00/run/systemd/notify\x00\x00\x00"
        assert decode_sockaddr(data) == {"family": "AF_LOCAL", "path": "/run/systemd/notify"}

    def test_path_without_nul(self) -> None:
        """Without a NUL the path runs to the end of the buffer."""
        data = b"\x01\x00/dev/log"
        assert decode_sockaddr(data)["path"] == "/dev/log"


class TestNetlink:
    """Verify AF_NETLINK decoding."""

    def test_pid_and_groups(self) -> None:
        """Two pad bytes, then little-endian pid and groups."""
        data = (
            b"\x10\x00\x00\x00"
            + NETLINK_PID.to_bytes(4, "little")
            + NETLINK_GROUPS.to_bytes(4, "little")
        )
        assert decode_sockaddr(data) == {
            "family": "AF_NETLINK",
            "pid": NETLINK_PID,
            "groups": NETLINK_GROUPS,
        }

    def test_short_buffer(self) -> None:
        """A truncated netlink address should fail."""
        with pytest.raises(SockaddrError):
            decode_sockaddr(b"\x10\x00\x00\x00\x01")


class TestErrors:
    """Verify rejection of undecodable buffers."""

    def test_unknown_family(self) -> None:
        """An unsupported family number should fail."""
        with pytest.raises(SockaddrError, match="Unknown socket family"):
            decode_sockaddr(bytes.fromhex("2A000000"))

    def test_empty_buffer(self) -> None:
        """No family at all should fail."""
        with pytest.raises(SockaddrError):
            decode_sockaddr(b"")

    def test_is_a_value_error(self) -> None:
        """Callers may catch ``ValueError``."""
        assert issubclass(SockaddrError, ValueError)
