"""History kept in memory and optionally mirrored to a plain text file."""

from __future__ import annotations

import itertools
import os
from collections import deque
from pathlib import Path
from typing import Callable

from filelock import FileLock

from reedline.history.base import (
    CommandLineSearch,
    History,
    HistoryError,
    HistoryFeatureUnsupportedError,
    SearchDirection,
    SearchKind,
    SearchQuery,
)
from reedline.history.item import HistoryItem

HISTORY_SIZE = 1000
NEWLINE_ESCAPE = "<\\n>"

_NAME = "FileBackedHistory"


def _encode_entry(text: str) -> str:
    return text.replace("\n", NEWLINE_ESCAPE)


def _decode_entry(text: str) -> str:
    return text.replace(NEWLINE_ESCAPE, "\n")


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_decode_entry(line[:-1] if line.endswith("\r") else line) for line in lines]


def _matches(search: CommandLineSearch | None, cmd: str) -> bool:
    if search is None:
        return True
    if search.kind is SearchKind.PREFIX:
        return cmd.startswith(search.text)
    if search.kind is SearchKind.SUBSTRING:
        return search.text in cmd
    return cmd == search.text


def _entry(item_id: int | None, command_line: str) -> HistoryItem:
    return HistoryItem(command_line=command_line, id=item_id)


class FileBackedHistory(History):
    """Bash-like history holding at most ``capacity`` command lines.

    Item ids are positions in the history. When associated with a file
    (see :meth:`with_file`), unwritten entries are appended to it on
    :meth:`sync` and on :meth:`close`, one entry per line.
    """

    def __init__(self, capacity: int = HISTORY_SIZE) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._entries: deque[str] = deque()
        self._file: Path | None = None
        self._len_on_disk = 0

    @classmethod
    def with_file(cls, capacity: int, file: str | os.PathLike[str]) -> FileBackedHistory:
        """Create a history synchronised with ``file``, creating its directories."""
        hist = cls(capacity)
        path = Path(file)
        path.parent.mkdir(parents=True, exist_ok=True)
        hist._file = path
        hist.sync()
        return hist

    def save(self, item: HistoryItem) -> HistoryItem:
        """Append the command line unless it is empty or repeats the last entry."""
        entry = item.command_line
        entry_id = None
        if entry and (not self._entries or self._entries[-1] != entry):
            if len(self._entries) == self.capacity and self._entries:
                self._entries.popleft()
                self._len_on_disk = max(self._len_on_disk - 1, 0)
            self._entries.append(entry)
            entry_id = len(self._entries) - 1
        return _entry(entry_id, entry)

    def load(self, item_id: int) -> HistoryItem:
        if not 0 <= item_id < len(self._entries):
            raise HistoryError(f"no history item with id {item_id}")
        return _entry(item_id, self._entries[item_id])

    def count(self, query: SearchQuery) -> int:
        return len(self.search(query))

    def search(self, query: SearchQuery) -> list[HistoryItem]:
        if query.start_time is not None or query.end_time is not None:
            raise HistoryFeatureUnsupportedError(_NAME, "filtering by time")
        flt = query.filter
        if any(
            value is not None
            for value in (flt.hostname, flt.cwd_exact, flt.cwd_prefix, flt.exit_successful)
        ):
            raise HistoryFeatureUnsupportedError(_NAME, "filtering by extra info")

        backward = query.direction is SearchDirection.BACKWARD
        lower, upper = (
            (query.end_id, query.start_id) if backward else (query.start_id, query.end_id)
        )
        last = len(self._entries) - 1
        min_id = 0 if lower is None else lower + 1
        max_id = last if upper is None else upper - 1
        if max_id < 0 or min_id < 0 or min_id > last or min_id > max_id:
            return []

        window = itertools.islice(enumerate(self._entries), min_id, max_id + 1)
        ordered = reversed(list(window)) if backward else window
        results = (
            _entry(idx, cmd)
            for idx, cmd in ordered
            if _matches(flt.command_line, cmd)
            and (flt.not_command_line is None or cmd != flt.not_command_line)
        )
        if query.limit is not None and query.limit >= 0:
            results = itertools.islice(results, query.limit)
        return list(results)

    def update(
        self, item_id: int, updater: Callable[[HistoryItem], HistoryItem]
    ) -> None:
        raise HistoryFeatureUnsupportedError(_NAME, "updating entries")

    def delete(self, item_id: int) -> None:
        raise HistoryFeatureUnsupportedError(_NAME, "removing entries")

    def sync(self) -> None:
        """Write unwritten entries to the file, merging what others wrote there.

        If the file would exceed ``capacity``, the oldest lines are dropped.
        """
        if self._file is None:
            return
        path = self._file
        path.parent.mkdir(parents=True, exist_ok=True)
        own = list(itertools.islice(self._entries, self._len_on_disk, None))

        with FileLock(f"{path}.lock"):
            try:
                with path.open("r", encoding="utf-8", newline="") as fh:
                    foreign = _split_lines(fh.read())
            except FileNotFoundError:
                foreign = []

            truncate = len(foreign) + len(own) > self.capacity
            if truncate:
                keep = max(self.capacity - len(own), 0)
                foreign = foreign[len(foreign) - keep :]
                to_write = foreign + own
            else:
                to_write = own

            with path.open("w" if truncate else "a", encoding="utf-8", newline="") as fh:
                fh.writelines(_encode_entry(line) + "\n" for line in to_write)

        self._entries = deque(foreign + own)
        self._len_on_disk = len(self._entries)

    def next_session_id(self) -> int:
        """Sessions are not told apart; always 0."""
        return 0

    def close(self) -> None:
        """Write any unwritten entries to the file."""
        self.sync()

    def __enter__(self) -> FileBackedHistory:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()