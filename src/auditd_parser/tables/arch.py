"""Audit architecture identifiers.

``SYSCALL`` records carry ``arch=<hex>``, an ``AUDIT_ARCH_*`` constant
from ``include/uapi/linux/audit.h``.  Each constant is an ELF machine
number (``EM_*`` in ``include/uapi/linux/elf-em.h``) combined with flag
bits:

- ``ARCH_64BIT`` (``__AUDIT_ARCH_64BIT``) for 64-bit ABIs.
- ``ARCH_LE`` (``__AUDIT_ARCH_LE``) for little-endian ABIs.
- ``ARCH_CONVENTION_MIPS64_N32`` for the MIPS n32 calling convention.

So ``c000003e`` is ``EM_X86_64 (0x3e) | 64BIT | LE``, printed as
``x86_64``.  The arch is needed to turn a syscall number into a name,
because every architecture numbers its syscalls differently.
"""

from enum import IntEnum

ARCH_CONVENTION_MIPS64_N32 = 0x2000_0000
ARCH_64BIT = 0x8000_0000
ARCH_LE = 0x4000_0000


class ElfMachine(IntEnum):
    """ELF machine numbers that have an audit architecture."""

    EM_SPARC = 2
    EM_386 = 3
    EM_68K = 4
    EM_MIPS = 8
    EM_PARISC = 15
    EM_PPC = 20
    EM_PPC64 = 21
    EM_S390 = 22
    EM_ARM = 40
    EM_SH = 42
    EM_SPARCV9 = 43
    EM_H8_300 = 46
    EM_IA_64 = 50
    EM_X86_64 = 62
    EM_CRIS = 76
    EM_M32R = 88
    EM_OPENRISC = 92
    EM_ARCOMPACT = 93
    EM_XTENSA = 94
    EM_UNICORE = 110
    EM_ALTERA_NIOS2 = 113
    EM_TI_C6000 = 140
    EM_HEXAGON = 164
    EM_NDS32 = 167
    EM_AARCH64 = 183
    EM_TILEPRO = 188
    EM_MICROBLAZE = 189
    EM_TILEGX = 191
    EM_ARCV2 = 195
    EM_RISCV = 243
    EM_CSKY = 252
    EM_LOONGARCH = 258
    EM_FRV = 0x5441
    EM_ALPHA = 0x9026


_M = ElfMachine

ARCHITECTURES: dict[int, str] = {
    _M.EM_AARCH64 | ARCH_64BIT | ARCH_LE: "aarch64",
    _M.EM_ALPHA | ARCH_64BIT | ARCH_LE: "alpha",
    _M.EM_ARCOMPACT | ARCH_LE: "arcompact",
    _M.EM_ARCOMPACT: "arcompactbe",
    _M.EM_ARCV2 | ARCH_LE: "arcv2",
    _M.EM_ARCV2: "arcv2be",
    _M.EM_ARM | ARCH_LE: "arm",
    _M.EM_ARM: "armeb",
    _M.EM_TI_C6000 | ARCH_LE: "c6x",
    _M.EM_TI_C6000: "c6xbe",
    _M.EM_CRIS | ARCH_LE: "cris",
    _M.EM_CSKY | ARCH_LE: "csky",
    _M.EM_FRV: "frv",
    _M.EM_H8_300: "h8300",
    _M.EM_HEXAGON: "hexagon",
    _M.EM_386 | ARCH_LE: "i386",
    _M.EM_IA_64 | ARCH_64BIT | ARCH_LE: "ia64",
    _M.EM_M32R: "m32r",
    _M.EM_68K: "m68k",
    _M.EM_MICROBLAZE: "microblaze",
    _M.EM_MIPS: "mips",
    _M.EM_MIPS | ARCH_LE: "mipsel",
    _M.EM_MIPS | ARCH_64BIT: "mips64",
    _M.EM_MIPS | ARCH_64BIT | ARCH_CONVENTION_MIPS64_N32: "mips64n32",
    _M.EM_MIPS | ARCH_64BIT | ARCH_LE: "mipsel64",
    _M.EM_MIPS | ARCH_64BIT | ARCH_LE | ARCH_CONVENTION_MIPS64_N32: "mipsel64n32",
    _M.EM_NDS32 | ARCH_LE: "nds32",
    _M.EM_NDS32: "nds32be",
    _M.EM_ALTERA_NIOS2 | ARCH_LE: "nios2",
    _M.EM_OPENRISC: "openrisc",
    _M.EM_PARISC: "parisc",
    _M.EM_PARISC | ARCH_64BIT: "parisc64",
    _M.EM_PPC: "ppc",
    _M.EM_PPC64 | ARCH_64BIT: "ppc64",
    _M.EM_PPC64 | ARCH_64BIT | ARCH_LE: "ppc64le",
    _M.EM_RISCV | ARCH_LE: "riscv32",
    _M.EM_RISCV | ARCH_64BIT | ARCH_LE: "riscv64",
    _M.EM_S390: "s390",
    _M.EM_S390 | ARCH_64BIT: "s390x",
    _M.EM_SH: "sh",
    _M.EM_SH | ARCH_LE: "shel",
    _M.EM_SH | ARCH_64BIT: "sh64",
    _M.EM_SH | ARCH_64BIT | ARCH_LE: "shel64",
    _M.EM_SPARC: "sparc",
    _M.EM_SPARCV9 | ARCH_64BIT: "sparc64",
    _M.EM_TILEGX | ARCH_64BIT | ARCH_LE: "tilegx",
    _M.EM_TILEGX | ARCH_LE: "tilegx32",
    _M.EM_TILEPRO | ARCH_LE: "tilepro",
    _M.EM_UNICORE | ARCH_LE: "unicore",
    _M.EM_X86_64 | ARCH_64BIT | ARCH_LE: "x86_64",
    _M.EM_XTENSA: "xtensa",
    _M.EM_LOONGARCH | ARCH_LE: "loongarch32",
    _M.EM_LOONGARCH | ARCH_64BIT | ARCH_LE: "loongarch64",
}
"""Map every ``AUDIT_ARCH_*`` value to its architecture name."""


def resolve_arch(value: int) -> str | None:
    """Return the architecture name for an ``AUDIT_ARCH_*`` value."""
    return ARCHITECTURES.get(value)
