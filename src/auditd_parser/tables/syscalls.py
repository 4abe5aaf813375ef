"""Syscall number tables, one per supported architecture.

In Linux, user programs enter the kernel through a numbered trap: the
number selects a handler from a per-architecture table.  ``SYSCALL``
audit records log that number (``syscall=59``), not the name, so the
same number means ``execve`` on x86_64 but ``rt_sigreturn`` on aarch64.

The tables ship as package data in the kernel's own ``syscall.tbl``
format, one entry per line::

    <number> <abi> <name> [<entry point>]

Only the ABIs in ``SYSCALL_ABIS`` are loaded; an x32 or 32-bit compat
entry sharing the file is skipped.

Supported architectures:
    - **x86_64**: ``arch/x86/entry/syscalls/syscall_64.tbl``.
    - **aarch64**: the generic table ``scripts/syscall.tbl``, which
      arm64 builds its 64-bit table from.

Tables are parsed lazily, once per process, and never mutated, so
concurrent readers need no locking.
"""

from functools import cache
from importlib import resources

SYSCALL_ABIS: frozenset[str] = frozenset({"common", "64"})
"""ABIs whose entries make up the native 64-bit syscall table."""

TABLE_FILES: dict[str, str] = {
    "x86_64": "x86_64.tbl",
    "aarch64": "generic.tbl",
}
"""Map each supported architecture name to its table file."""

_MIN_COLUMNS = 3


def parse_syscall_table(text: str, abis: frozenset[str] = SYSCALL_ABIS) -> dict[int, str]:
    """Parse ``syscall.tbl`` text into a number-to-name mapping.

    Comments, blank lines, malformed lines, and entries for other ABIs
    are skipped.

    Args:
        text: The table contents.
        abis: ABIs to keep.

    Returns:
        A mapping from syscall number to syscall name.

    """
    table: dict[int, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = stripped.split()
        if len(parts) < _MIN_COLUMNS or not parts[0].isdigit():
            continue
        number, abi, name = int(parts[0]), parts[1], parts[2]
        if abi in abis:
            table[number] = name
    return table


@cache
def syscall_table(arch: str) -> dict[int, str]:
    """Return the syscall table for *arch*, or an empty one if unsupported."""
    filename = TABLE_FILES.get(arch)
    if filename is None:
        return {}
    text = resources.files("auditd_parser.tables").joinpath("data").joinpath(filename).read_text()
    return parse_syscall_table(text)


def resolve_syscall(arch: str, number: int) -> str | None:
    """Return the syscall name for *number* on *arch*.

    Returns:
        The name, or None if the architecture is unsupported or the
        number is not in its table.

    """
    return syscall_table(arch).get(number)
