"""Queries, filters, errors and the abstract interface shared by all histories."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from reedline.history.item import HistoryItem


class HistoryError(Exception):
    """Raised when a history operation fails."""


class HistoryFeatureUnsupportedError(HistoryError):
    """Raised when a history backend cannot perform the requested operation."""

    def __init__(self, history: str, feature: str) -> None:
        super().__init__(f"{history} does not support {feature}")
        self.history = history
        self.feature = feature


class HistoryDatabaseError(HistoryError):
    """Raised when the storage behind a history reports an error."""


class NavigationKind(enum.Enum):
    """Browsing modes for a history."""

    NORMAL = "Normal"
    PREFIX_SEARCH = "PrefixSearch"
    SUBSTRING_SEARCH = "SubstringSearch"


@dataclass(frozen=True)
class HistoryNavigationQuery:
    """A browsing mode and its argument.

    For ``NORMAL`` the value is the editor state typed before browsing
    started, so that it can be restored; for the search kinds it is the
    search string.
    """

    kind: NavigationKind
    value: Any = None


class SearchKind(enum.Enum):
    """Ways to match a command line."""

    PREFIX = "Prefix"
    SUBSTRING = "Substring"
    EXACT = "Exact"


@dataclass(frozen=True)
class CommandLineSearch:
    """A text constraint on the command line of history items."""

    kind: SearchKind
    text: str


class SearchDirection(enum.Enum):
    """Order in which a search walks through the history."""

    BACKWARD = "Backward"
    FORWARD = "Forward"


@dataclass
class SearchFilter:
    """Additional constraints for querying a history."""

    command_line: CommandLineSearch | None = None
    not_command_line: str | None = None
    hostname: str | None = None
    cwd_exact: str | None = None
    cwd_prefix: str | None = None
    exit_successful: bool | None = None

    @classmethod
    def from_text_search(cls, cmd: CommandLineSearch) -> SearchFilter:
        """A filter constraining only the command line."""
        return cls(command_line=cmd)

    @classmethod
    def anything(cls) -> SearchFilter:
        """A filter without any constraint."""
        return cls()


@dataclass
class SearchQuery:
    """A search in a history.

    ``start_id``/``start_time`` and ``end_id``/``end_time`` bound the
    results exclusively at the start and inclusively at the end, relative
    to the search direction.
    """

    direction: SearchDirection
    start_time: datetime | None = None
    end_time: datetime | None = None
    start_id: int | None = None
    end_id: int | None = None
    limit: int | None = None
    filter: SearchFilter = field(default_factory=SearchFilter)

    @classmethod
    def all_that_contain_rev(cls, contains: str) -> SearchQuery:
        """All entries containing ``contains``, newest first."""
        return cls(
            direction=SearchDirection.BACKWARD,
            filter=SearchFilter.from_text_search(
                CommandLineSearch(SearchKind.SUBSTRING, contains)
            ),
        )

    @classmethod
    def last_with_search(cls, filter: SearchFilter) -> SearchQuery:
        """The most recent entry matching ``filter``."""
        return cls(direction=SearchDirection.BACKWARD, limit=1, filter=filter)

    @classmethod
    def last_with_prefix(cls, prefix: str) -> SearchQuery:
        """The most recent entry starting with ``prefix``."""
        return cls.last_with_search(
            SearchFilter.from_text_search(CommandLineSearch(SearchKind.PREFIX, prefix))
        )

    @classmethod
    def everything(cls, direction: SearchDirection) -> SearchQuery:
        """All entries in the given direction."""
        return cls(direction=direction)


class History(ABC):
    """A store of run commands, e.g. a plain text file or a database."""

    @abstractmethod
    def save(self, item: HistoryItem) -> HistoryItem:
        """Store ``item``; a new id is assigned when it has none."""

    @abstractmethod
    def load(self, item_id: int) -> HistoryItem:
        """Return the item with the given id."""

    @abstractmethod
    def next_session_id(self) -> int:
        """Return the next unused session id."""

    @abstractmethod
    def count(self, query: SearchQuery) -> int:
        """Count the results of ``query``."""

    def count_all(self) -> int:
        """Return the total number of items."""
        return self.count(SearchQuery.everything(SearchDirection.FORWARD))

    @abstractmethod
    def search(self, query: SearchQuery) -> list[HistoryItem]:
        """Return the results of ``query``."""

    @abstractmethod
    def update(
        self, item_id: int, updater: Callable[[HistoryItem], HistoryItem]
    ) -> None:
        """Replace an item by the result of ``updater`` applied to it."""

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an item."""

    @abstractmethod
    def sync(self) -> None:
        """Make sure the history is written to its storage."""