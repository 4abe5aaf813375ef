"""Linux capability names, indexed by bit position.

The order mirrors ``include/uapi/linux/capability.h``: ``CAP_CHOWN`` is
bit 0, ``CAP_DAC_OVERRIDE`` bit 1, and so on up to
``CAP_CHECKPOINT_RESTORE`` at bit 40.  Names are lowercased and lose
their ``CAP_`` prefix, the form ``capsh --decode`` prints.

Keep this table in sync with the kernel: a bit beyond the end of the
table decodes as ``UNKNOWN_CAPABILITY`` rather than failing.
"""

CAPABILITIES: tuple[str, ...] = (
    "chown",
    "dac_override",
    "dac_read_search",
    "fowner",
    "fsetid",
    "kill",
    "setgid",
    "setuid",
    "setpcap",
    "linux_immutable",
    "net_bind_service",
    "net_broadcast",
    "net_admin",
    "net_raw",
    "ipc_lock",
    "ipc_owner",
    "sys_module",
    "sys_rawio",
    "sys_chroot",
    "sys_ptrace",
    "sys_pacct",
    "sys_admin",
    "sys_boot",
    "sys_nice",
    "sys_resource",
    "sys_time",
    "sys_tty_config",
    "mknod",
    "lease",
    "audit_write",
    "audit_control",
    "setfcap",
    "mac_override",
    "mac_admin",
    "syslog",
    "wake_alarm",
    "block_suspend",
    "audit_read",
    "perfmon",
    "bpf",
    "checkpoint_restore",
)
"""Capability names in bit order."""

UNKNOWN_CAPABILITY = "UNKNOWN"


def capability_name(bit: int) -> str:
    """Return the capability name for *bit*, or ``UNKNOWN_CAPABILITY``."""
    if 0 <= bit < len(CAPABILITIES):
        return CAPABILITIES[bit]
    return UNKNOWN_CAPABILITY
