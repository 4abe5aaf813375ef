"""Tests for the per-architecture syscall tables.

The tables ship as package data in the kernel's ``syscall.tbl`` format
and are parsed lazily.  Only the native 64-bit ABIs are loaded.
"""

from auditd_parser.tables.syscalls import (
    TABLE_FILES,
    parse_syscall_table,
    resolve_syscall,
    syscall_table,
)

X86_EXECVE = 59
X86_OPENAT = 257
X32_EXECVE = 520
ARM64_EXECVE = 221
ARM64_OPENAT = 56
ARM64_NEWFSTATAT = 79

SAMPLE_TABLE = """\
# a comment

0\tcommon\tread\tsys_read
1\t64\twrite\tsys_write
2\tx32\tcompat_open\tcompat_sys_open
3\ti386
not-a-number\tcommon\tbogus
"""


class TestParseSyscallTable:
    """Verify parsing of ``syscall.tbl`` text."""

    def test_keeps_native_abis(self) -> None:
        """``common`` and ``64`` entries should be kept."""
        table = parse_syscall_table(SAMPLE_TABLE)
        assert table == {0: "read", 1: "write"}

    def test_custom_abis(self) -> None:
        """Callers may select other ABIs."""
        table = parse_syscall_table(SAMPLE_TABLE, frozenset({"x32"}))
        assert table == {2: "compat_open"}


class TestX86_64:
    """Verify the x86_64 table."""

    def test_common_syscalls(self) -> None:
        """Well-known x86_64 numbers should resolve."""
        assert resolve_syscall("x86_64", 0) == "read"
        assert resolve_syscall("x86_64", X86_EXECVE) == "execve"
        assert resolve_syscall("x86_64", X86_OPENAT) == "openat"

    def test_x32_entries_skipped(self) -> None:
        """x32 compat numbers are not part of the 64-bit table."""
        assert resolve_syscall("x86_64", X32_EXECVE) is None


class TestAarch64:
    """Verify the aarch64 (generic) table."""

    def test_common_syscalls(self) -> None:
        """The same syscall has a different number on aarch64."""
        assert resolve_syscall("aarch64", ARM64_EXECVE) == "execve"
        assert resolve_syscall("aarch64", ARM64_OPENAT) == "openat"

    def test_64bit_variant_wins(self) -> None:
        """Numbers with 32- and 64-bit variants resolve to the 64-bit one."""
        assert resolve_syscall("aarch64", ARM64_NEWFSTATAT) == "newfstatat"


class TestUnsupportedArch:
    """Verify behaviour for architectures without a table."""

    def test_unknown_arch_is_empty(self) -> None:
        """An unsupported arch has an empty table."""
        assert syscall_table("s390x") == {}
        assert resolve_syscall("s390x", 1) is None

    def test_every_table_file_loads(self) -> None:
        """Each shipped table should parse to a non-empty mapping."""
        for arch in TABLE_FILES:
            assert syscall_table(arch)

    def test_tables_are_cached(self) -> None:
        """Repeated lookups return the same table object."""
        assert syscall_table("x86_64") is syscall_table("x86_64")
