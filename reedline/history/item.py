"""A single entry in the command history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


@dataclass(slots=True)
class HistoryItem:
    """One run command with optional extra context.

    ``id`` is the primary key within one history, ``session_id`` tells
    apart separate shell sessions, and ``more_info`` holds arbitrary
    JSON-serialisable data.
    """

    command_line: str
    id: int | None = None
    start_timestamp: datetime | None = None
    session_id: int | None = None
    hostname: str | None = None
    cwd: str | None = None
    duration: timedelta | None = None
    exit_status: int | None = None
    more_info: Any | None = None

    @classmethod
    def from_command_line(cls, cmd: str) -> HistoryItem:
        """Create an item holding only the command line."""
        return cls(command_line=str(cmd))