"""Tests for the capability bitmap and permission mask decoders."""

from auditd_parser.decoders import AuditPerm, decode_capabilities, decode_perm_mask

FULL_CAPABILITY_SET = 0x1FFFFFFFFFF
CAPABILITY_COUNT = 41


class TestDecodeCapabilities:
    """Verify capability bitmap decoding."""

    def test_low_bits(self) -> None:
        """Bits 0 and 1 are chown and dac_override."""
        assert decode_capabilities(3) == ["chown", "dac_override"]

    def test_empty_set(self) -> None:
        """No bits set means no capabilities."""
        assert decode_capabilities(0) == []

    def test_full_set(self) -> None:
        """A root process usually holds every known capability."""
        names = decode_capabilities(FULL_CAPABILITY_SET)
        assert len(names) == CAPABILITY_COUNT
        assert names[-1] == "checkpoint_restore"

    def test_bits_past_table_are_unknown(self) -> None:
        """High bits decode as UNKNOWN instead of failing."""
        assert decode_capabilities(1 << 63) == ["UNKNOWN"]


class TestDecodePermMask:
    """Verify watch permission mask decoding."""

    def test_zero_means_all(self) -> None:
        """A zero mask stands for every permission."""
        assert decode_perm_mask(0) == ["exec", "write", "read", "attr"]

    def test_fixed_order(self) -> None:
        """Names come out in exec, write, read, attr order."""
        mask = AuditPerm.ATTR | AuditPerm.WRITE
        assert decode_perm_mask(mask) == ["write", "attr"]

    def test_unknown_bits_ignored(self) -> None:
        """Bits beyond the four flags are dropped."""
        assert decode_perm_mask(0b1_0100) == ["read"]
