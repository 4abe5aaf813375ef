"""Structured diagnostic log for parsing runs.

Parsing never writes to a console or file on its own.  Callers that
want to know what happened pass a ``Logger`` to ``parse`` and read the
entries afterwards:

- **LogLevel**: severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry**: a single structured record (level, message, source,
  and the input line number when known).
- **Logger**: an append-only log with filtering and clearing, optionally
  capped so only the newest entries are kept.

The parser logs an ERROR for every rejected line and a DEBUG for every
field whose interpreter gave up and kept the raw text.  The CLI prints
the errors to stderr; the web app serves its capped log as JSON.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Using IntEnum means levels compare with ``<`` / ``>`` naturally,
    which makes minimum-level filtering trivial.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The stage that generated the event (``"parser"``,
            ``"interpret"``, ``"cli"``).
        line_number: The 1-based input line, or None when the caller
            parses a single line.

    """

    level: LogLevel
    message: str
    source: str
    line_number: int | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source (line N): message``."""
        if self.line_number is None:
            return f"[{self.level.name}] {self.source}: {self.message}"
        return f"[{self.level.name}] {self.source} (line {self.line_number}): {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict of this entry."""
        return {
            "level": self.level.name,
            "message": self.message,
            "source": self.source,
            "line_number": self.line_number,
        }


class Logger:
    """Append-only log buffer with filtering.

    The logger collects ``LogEntry`` records and provides simple
    querying by level and/or source.  With ``max_entries`` set, the
    oldest entry is dropped once the cap is reached.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        """Create an empty logger.

        Args:
            max_entries: Keep at most this many entries, or all if None.

        Raises:
            ValueError: If *max_entries* is not positive.

        """
        if max_entries is not None and max_entries <= 0:
            msg = f"max_entries must be positive, got {max_entries}"
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were logged."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        line_number: int | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Stage that generated the event.
            line_number: Input line the event refers to, if known.

        """
        self._entries.append(
            LogEntry(level=level, message=message, source=source, line_number=line_number)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
