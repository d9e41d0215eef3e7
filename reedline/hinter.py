"""Inline hints for the line being typed, drawn from the history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import takewhile

from reedline.history.base import History, SearchQuery

DEFAULT_HINT_STYLE = "37"


class Hinter(ABC):
    """Produces the hint shown after the current line."""

    @abstractmethod
    def handle(self, line: str, pos: int, history: History, use_ansi_coloring: bool) -> str:
        """Compute the hint for ``line`` and return it formatted for display."""

    @abstractmethod
    def complete_hint(self) -> str:
        """The current hint, unformatted, for completing it in full."""

    @abstractmethod
    def next_hint_token(self) -> str:
        """The first token of the current hint, for completing it word by word."""


class DefaultHinter(Hinter):
    """Suggests the rest of the most recent history entry starting with the line.

    ``style`` holds the ANSI SGR parameters used to paint the hint, and
    ``min_chars`` the number of characters needed before hints appear.
    """

    def __init__(self, style: str = DEFAULT_HINT_STYLE, min_chars: int = 1) -> None:
        self.style = style
        self.min_chars = min_chars
        self._current_hint = ""

    def handle(self, line: str, pos: int, history: History, use_ansi_coloring: bool) -> str:
        hint = ""
        if len(line) >= self.min_chars:
            results = history.search(SearchQuery.last_with_prefix(line))
            if results:
                hint = results[0].command_line[len(line):]
        self._current_hint = hint
        if use_ansi_coloring and hint:
            return f"\x1b[{self.style}m{hint}\x1b[0m"
        return hint

    def complete_hint(self) -> str:
        return self._current_hint

    def next_hint_token(self) -> str:
        hint = self._current_hint
        leading = "".join(takewhile(str.isspace, hint))
        word = "".join(takewhile(lambda c: not c.isspace(), hint[len(leading):]))
        return leading + word