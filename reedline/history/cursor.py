"""Stateful stepping through a history according to a navigation query."""

from __future__ import annotations

from dataclasses import replace

from reedline.history.base import (
    CommandLineSearch,
    History,
    HistoryNavigationQuery,
    NavigationKind,
    SearchDirection,
    SearchFilter,
    SearchKind,
    SearchQuery,
)
from reedline.history.item import HistoryItem


class HistoryCursor:
    """Walks a history backward and forward, respecting a navigation query.

    Consecutive entries with the same command line are skipped unless
    ``skip_dupes`` is false.
    """

    def __init__(self, query: HistoryNavigationQuery, skip_dupes: bool = True) -> None:
        self._query = query
        self._current: HistoryItem | None = None
        self.skip_dupes = skip_dupes

    def back(self, history: History) -> None:
        """Move to an older entry; stays put when there is none."""
        self._navigate(history, SearchDirection.BACKWARD)

    def forward(self, history: History) -> None:
        """Move to a newer entry; past the newest, the cursor holds nothing."""
        self._navigate(history, SearchDirection.FORWARD)

    def string_at_cursor(self) -> str | None:
        """The command line at the cursor, if any."""
        return None if self._current is None else self._current.command_line

    def navigation(self) -> HistoryNavigationQuery:
        """The navigation query this cursor follows."""
        return self._query

    def _search_filter(self) -> SearchFilter:
        kind = self._query.kind
        if kind is NavigationKind.PREFIX_SEARCH:
            flt = SearchFilter.from_text_search(
                CommandLineSearch(SearchKind.PREFIX, self._query.value)
            )
        elif kind is NavigationKind.SUBSTRING_SEARCH:
            flt = SearchFilter.from_text_search(
                CommandLineSearch(SearchKind.SUBSTRING, self._query.value)
            )
        else:
            flt = SearchFilter.anything()
        if self.skip_dupes and self._current is not None:
            flt = replace(flt, not_command_line=self._current.command_line)
        return flt

    def _navigate(self, history: History, direction: SearchDirection) -> None:
        if direction is SearchDirection.FORWARD and self._current is None:
            # Without a starting point the cursor is already at the newest end.
            return
        start_id = None if self._current is None else self._current.id
        results = history.search(
            SearchQuery(
                direction=direction,
                start_id=start_id,
                limit=1,
                filter=self._search_filter(),
            )
        )
        if len(results) == 1:
            self._current = results[0]
        elif direction is SearchDirection.FORWARD:
            self._current = None