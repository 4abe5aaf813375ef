"""POSIX signal numbers, as printed by the kernel in audit records.

Fields such as ``sig=`` (``ANOM_ABEND``, ``OBJ_PID``) and
``sigev_signo=`` carry a bare signal number.  The numbering follows the
generic Linux ABI (``include/uapi/asm-generic/signal.h``), which is what
x86_64 and aarch64 both use.

Two numbers have synonyms in the kernel headers:

- 6 is both ``SIGABRT`` and ``SIGIOT``.
- 29 is both ``SIGPOLL`` and ``SIGIO``.

``Signal`` declares the preferred name first, so ``Signal(6).name`` is
``"SIGABRT"`` and the synonyms survive only as enum aliases.

Design choices:
    - **IntEnum with Linux values**: a signal number from a log line
      converts straight to a member with ``Signal(number)``.
    - **Unknown numbers are not an error**: ``resolve_signal`` returns
      ``None`` and the caller keeps the plain number.
"""

from enum import IntEnum


class Signal(IntEnum):
    """Standard signals with Linux numeric values."""

    SIGHUP = 1
    SIGINT = 2
    SIGQUIT = 3
    SIGILL = 4
    SIGTRAP = 5
    SIGABRT = 6
    SIGIOT = 6
    SIGBUS = 7
    SIGFPE = 8
    SIGKILL = 9
    SIGUSR1 = 10
    SIGSEGV = 11
    SIGUSR2 = 12
    SIGPIPE = 13
    SIGALRM = 14
    SIGTERM = 15
    SIGSTKFLT = 16
    SIGCHLD = 17
    SIGCONT = 18
    SIGSTOP = 19
    SIGTSTP = 20
    SIGTTIN = 21
    SIGTTOU = 22
    SIGURG = 23
    SIGXCPU = 24
    SIGXFSZ = 25
    SIGVTALRM = 26
    SIGPROF = 27
    SIGWINCH = 28
    SIGPOLL = 29
    SIGIO = 29
    SIGPWR = 30
    SIGSYS = 31
    SIGUNUSED = 32


def resolve_signal(number: int) -> Signal | None:
    """Return the signal for *number*, or None if it is not in the table."""
    try:
        return Signal(number)
    except ValueError:
        return None
