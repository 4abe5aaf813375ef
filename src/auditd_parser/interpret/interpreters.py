"""Field interpreters: one raw string in, one typed value out.

Each interpreter replays a single kernel or auditd encoding rule.  None
of them raises: when the rule does not apply (a uid that is not a
number, a hex string with an odd length), the interpreter returns the
original text untouched, so a typed record never loses information.

Number parsing is stricter than ``int()``: no whitespace, no
underscores, no ``0x`` prefixes, and a fixed bit width.  A value that
would not fit the kernel's C type is left as text.
"""

import binascii
import re

from auditd_parser.decoders.bitmaps import decode_capabilities, decode_perm_mask
from auditd_parser.decoders.mode import ModeError, parse_mode
from auditd_parser.decoders.sockaddr import SockaddrError, decode_sockaddr
from auditd_parser.parser.body import parse_key_value_list
from auditd_parser.parser.errors import ParseError
from auditd_parser.tables.arch import resolve_arch
from auditd_parser.tables.errno import resolve_errno
from auditd_parser.tables.rule_lists import resolve_rule_list
from auditd_parser.tables.signals import resolve_signal
from auditd_parser.tables.syscalls import resolve_syscall
from auditd_parser.values import FieldValue

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

ROOT_UID = 0
UNSET_IDS = frozenset({4_294_967_295, -1})
"""The kernel's unset id, ``(uid_t)-1``, printed either unsigned or signed."""

RESULT_FAILED = "failed"
RESULT_SUCCESS = "success"
RESULT_UNSET = "unset"

MIN_LABEL_PARTS = 3
"""``user:role:type`` are required; sensitivity and category are optional."""


# -- Primitive decoding helpers ---------------------------------------------


def parse_unsigned(text: str, bits: int = 64) -> int | None:
    """Return *text* as an unsigned integer of *bits* width, or None."""
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value < 2**bits else None


def parse_signed(text: str, bits: int = 64) -> int | None:
    """Return *text* as a signed integer of *bits* width, or None."""
    if not _SIGNED_RE.fullmatch(text):
        return None
    value = int(text)
    limit = 2 ** (bits - 1)
    return value if -limit <= value < limit else None


def parse_hex_number(text: str, bits: int = 64) -> int | None:
    """Return *text* as a hex number of *bits* width, or None."""
    if not _HEX_RE.fullmatch(text):
        return None
    value = int(text, 16)
    return value if value < 2**bits else None


def decode_hex(text: str) -> bytes | None:
    """Return the bytes a hex string encodes, or None if it is not valid hex."""
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        return None


# -- Interpreters -------------------------------------------------------------


def interpret_escaped(raw: str) -> FieldValue:
    """Decode a hex-encoded string such as a path containing spaces."""
    data = decode_hex(raw)
    if data is None:
        return raw
    return data.decode("utf-8", errors="replace")


def interpret_msg(raw: str) -> FieldValue:
    """Re-parse a nested ``key=value`` list; its values stay grammar-level."""
    try:
        return parse_key_value_list(raw)
    except ParseError:
        return raw


def interpret_id(raw: str) -> FieldValue:
    """Interpret a uid or gid: ``"root"``, None for unset, or the number."""
    value = parse_signed(raw)
    if value is None:
        return raw
    if value == ROOT_UID:
        return "root"
    if value in UNSET_IDS:
        return None
    return value


def interpret_exit(raw: str) -> FieldValue:
    """Interpret a syscall return value (negative values are errnos)."""
    value = parse_signed(raw)
    return raw if value is None else value


def interpret_capability_bitmap(raw: str) -> FieldValue:
    """Interpret a 64-bit hex capability set as capability names."""
    bitmap = parse_hex_number(raw)
    return raw if bitmap is None else decode_capabilities(bitmap)


def interpret_perm(raw: str) -> FieldValue:
    """Interpret a watch permission mask as permission names."""
    mask = parse_unsigned(raw, bits=32)
    return raw if mask is None else decode_perm_mask(mask)


def interpret_result(raw: str) -> FieldValue:
    """Interpret ``res``/``result`` as ``failed``, ``success`` or ``unset``."""
    value = parse_unsigned(raw, bits=32)
    if value is not None:
        return {0: RESULT_FAILED, 1: RESULT_SUCCESS}.get(value, RESULT_UNSET)
    if raw in (RESULT_FAILED, RESULT_SUCCESS):
        return raw
    return RESULT_UNSET


def interpret_success(raw: str) -> FieldValue:
    """Interpret the syscall ``success=yes|no`` flag as a bool."""
    match raw:
        case "yes":
            return True
        case "no":
            return False
        case _:
            return raw


def interpret_signal(raw: str) -> FieldValue:
    """Interpret a signal number as its name."""
    number = parse_unsigned(raw)
    if number is None:
        return raw
    signal = resolve_signal(number)
    return number if signal is None else signal.name


def interpret_list(raw: str) -> FieldValue:
    """Interpret an audit rule filter list number as its name."""
    number = parse_unsigned(raw)
    if number is None:
        return raw
    rule_list = resolve_rule_list(number)
    return number if rule_list is None else rule_list.label


def interpret_errno(raw: str) -> FieldValue:
    """Interpret an errno number as its mnemonic."""
    number = parse_unsigned(raw)
    if number is None:
        return raw
    name = resolve_errno(number)
    return number if name is None else name


def interpret_proctitle(raw: str) -> FieldValue:
    """Decode a hex-encoded, NUL-separated argument vector into one string."""
    data = decode_hex(raw)
    if data is None:
        return raw
    return " ".join(arg.decode("utf-8", errors="replace") for arg in data.split(b"\x00"))


def interpret_grantors(raw: str) -> FieldValue:
    """Split a PAM ``grantors`` list on commas, without trimming."""
    if not raw:
        return []
    return raw.split(",")


def interpret_mac_label(raw: str) -> FieldValue:
    """Split an SELinux context ``user:role:type[:sensitivity[:category]]``."""
    parts = raw.split(":")
    if len(parts) < MIN_LABEL_PARTS:
        return raw
    label: dict[str, FieldValue] = {"user": parts[0], "role": parts[1], "type": parts[2]}
    for key, part in zip(("sensitivity", "category"), parts[3:5], strict=False):
        label[key] = part
    return label


def interpret_mode(raw: str) -> FieldValue:
    """Interpret an octal ``st_mode`` value."""
    try:
        return parse_mode(raw).to_dict()
    except ModeError:
        return raw


def interpret_sockaddr(raw: str) -> FieldValue:
    """Interpret a hex-encoded ``struct sockaddr``."""
    data = decode_hex(raw)
    if data is None:
        return raw
    try:
        return decode_sockaddr(data)
    except SockaddrError:
        return raw


def interpret_arch(raw: str) -> FieldValue:
    """Interpret a hex ``AUDIT_ARCH_*`` value as an architecture name."""
    value = parse_hex_number(raw, bits=32)
    if value is None:
        return raw
    name = resolve_arch(value)
    return raw if name is None else name


def interpret_syscall(raw: str, arch: str | None = None) -> FieldValue:
    """Interpret a syscall number using the record's raw ``arch`` value.

    Args:
        raw: The syscall number.
        arch: The raw ``arch`` field of the same record, if any.

    Returns:
        The syscall name, the plain number when the arch or number is
        unknown, or *raw* when it is not a number.

    """
    number = parse_unsigned(raw)
    if number is None:
        return raw
    arch_value = None if arch is None else parse_hex_number(arch, bits=32)
    arch_name = None if arch_value is None else resolve_arch(arch_value)
    name = None if arch_name is None else resolve_syscall(arch_name, number)
    return number if name is None else name
