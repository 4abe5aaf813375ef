"""Tests for the ``st_mode`` decoder."""

import pytest

from auditd_parser.decoders import (
    Attribute,
    FileType,
    ModeError,
    Permission,
    decode_mode,
    parse_mode,
)

REGULAR_644 = 0o100644


class TestDecodeMode:
    """Verify the bit arithmetic."""

    def test_regular_file(self) -> None:
        """0100644 is a regular file, rw-r--r--."""
        mode = decode_mode(REGULAR_644)
        assert mode.file_type is FileType.REGULAR_FILE
        assert mode.attributes == ()
        assert mode.user == (Permission.READ, Permission.WRITE)
        assert mode.group == (Permission.READ,)
        assert mode.other == (Permission.READ,)

    def test_sticky_directory(self) -> None:
        """/tmp is a sticky, world-writable directory."""
        mode = decode_mode(0o41777)
        assert mode.file_type is FileType.DIRECTORY
        assert mode.attributes == (Attribute.STICKY,)
        assert mode.other == (Permission.READ, Permission.WRITE, Permission.EXEC)

    def test_attribute_order(self) -> None:
        """Attributes are listed sticky, setgid, setuid."""
        mode = decode_mode(0o107755)
        assert mode.attributes == (Attribute.STICKY, Attribute.SETGID, Attribute.SETUID)

    @pytest.mark.parametrize(
        ("value", "file_type"),
        [
            (0o140777, FileType.SOCKET),
            (0o120777, FileType.SYMLINK),
            (0o060660, FileType.BLOCK_DEVICE),
            (0o020620, FileType.CHAR_DEVICE),
            (0o010644, FileType.FIFO),
            (0o000644, FileType.UNKNOWN),
        ],
    )
    def test_file_types(self, value: int, file_type: FileType) -> None:
        """Every file type nibble maps to its name."""
        assert decode_mode(value).file_type is file_type


class TestParseMode:
    """Verify validation of the octal text."""

    def test_leading_zero(self) -> None:
        """The kernel prints a leading zero."""
        assert parse_mode("0100644") == decode_mode(REGULAR_644)

    def test_to_dict(self) -> None:
        """The dict form uses plain strings and lists."""
        assert parse_mode("100644").to_dict() == {
            "file_type": "regular-file",
            "attributes": [],
            "user": ["read", "write"],
            "group": ["read"],
            "other": ["read"],
        }

    @pytest.mark.parametrize("text", ["", "0x1ff", "100648", "-644", "777 "])
    def test_rejects_non_octal(self, text: str) -> None:
        """Anything but octal digits is rejected."""
        with pytest.raises(ModeError):
            parse_mode(text)

    def test_rejects_wider_than_32_bits(self) -> None:
        """A mode that overflows 32 bits is rejected."""
        with pytest.raises(ModeError, match="32 bits"):
            parse_mode("77777777777777")
