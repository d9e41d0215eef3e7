import pytest

from reedline.history.base import HistoryNavigationQuery, NavigationKind
from reedline.history.cursor import HistoryCursor
from reedline.history.file_backed import FileBackedHistory
from reedline.history.item import HistoryItem


def _history(*entries):
    hist = FileBackedHistory()
    for entry in entries:
        hist.save(HistoryItem.from_command_line(entry))
    return hist


def _normal_cursor():
    return HistoryCursor(HistoryNavigationQuery(NavigationKind.NORMAL))


def _prefix_cursor(prefix):
    return HistoryCursor(HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, prefix))


def test_accessing_empty_history_returns_nothing():
    cursor = _normal_cursor()
    assert cursor.string_at_cursor() is None


def test_going_forward_in_empty_history_does_not_error_out():
    hist = _history()
    cursor = _normal_cursor()
    cursor.forward(hist)
    assert cursor.string_at_cursor() is None


def test_going_backwards_in_empty_history_does_not_error_out():
    hist = _history()
    cursor = _normal_cursor()
    cursor.back(hist)
    assert cursor.string_at_cursor() is None


def test_going_backwards_bottoms_out():
    hist = _history("command1", "command2")
    cursor = _normal_cursor()
    for _ in range(5):
        cursor.back(hist)
    assert cursor.string_at_cursor() == "command1"


def test_going_forwards_bottoms_out():
    hist = _history("command1", "command2")
    cursor = _normal_cursor()
    for _ in range(5):
        cursor.forward(hist)
    assert cursor.string_at_cursor() is None


def test_appends_only_unique():
    hist = _history("unique_old", "test", "test", "unique")
    assert hist.count_all() == 3


def test_prefix_search_works():
    hist = _history("find me as well", "test", "find me")
    cursor = _prefix_cursor("find")
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"


def test_prefix_search_bottoms_out():
    hist = _history("find me as well", "test", "find me")
    cursor = _prefix_cursor("find")
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"
    for _ in range(4):
        cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"


def test_prefix_search_returns_to_none():
    hist = _history("find me as well", "test", "find me")
    cursor = _prefix_cursor("find")
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"
    cursor.forward(hist)
    assert cursor.string_at_cursor() == "find me"
    cursor.forward(hist)
    assert cursor.string_at_cursor() is None
    cursor.forward(hist)
    assert cursor.string_at_cursor() is None


def test_prefix_search_ignores_consecutive_equivalent_entries_going_backwards():
    hist = _history("find me as well", "find me once", "test", "find me once")
    cursor = _prefix_cursor("find")
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me once"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"


def test_prefix_search_ignores_consecutive_equivalent_entries_going_forwards():
    hist = _history("find me once", "test", "find me once", "find me as well")
    cursor = _prefix_cursor("find")
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me as well"
    cursor.back(hist)
    cursor.back(hist)
    assert cursor.string_at_cursor() == "find me once"
    cursor.forward(hist)
    assert cursor.string_at_cursor() == "find me as well"
    cursor.forward(hist)
    assert cursor.string_at_cursor() is None


def test_substring_search_works():
    hist = _history(
        "substring",
        "don't find me either",
        "prefix substring",
        "don't find me",
        "prefix substring suffix",
    )
    cursor = HistoryCursor(
        HistoryNavigationQuery(NavigationKind.SUBSTRING_SEARCH, "substring")
    )
    cursor.back(hist)
    assert cursor.string_at_cursor() == "prefix substring suffix"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "prefix substring"
    cursor.back(hist)
    assert cursor.string_at_cursor() == "substring"


def test_substring_search_with_empty_value_returns_none():
    _history("substring")
    cursor = HistoryCursor(HistoryNavigationQuery(NavigationKind.SUBSTRING_SEARCH, ""))
    assert cursor.string_at_cursor() is None


def test_navigation_returns_the_query():
    query = HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, "ls")
    cursor = HistoryCursor(query)
    assert cursor.navigation() == query


def test_without_skipping_dupes_repeated_entries_are_visited():
    hist = _history("echo a", "test", "echo a")
    cursor = HistoryCursor(
        HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, "echo"), skip_dupes=False
    )
    cursor.back(hist)
    cursor.back(hist)
    assert cursor.string_at_cursor() == "echo a"
    cursor.forward(hist)
    assert cursor.string_at_cursor() == "echo a"
    cursor.forward(hist)
    assert cursor.string_at_cursor() is None


@pytest.mark.parametrize("steps, expected", [(1, "c"), (2, "b"), (3, "a"), (4, "a")])
def test_normal_navigation_walks_back_in_order(steps, expected):
    hist = _history("a", "b", "c")
    cursor = _normal_cursor()
    for _ in range(steps):
        cursor.back(hist)
    assert cursor.string_at_cursor() == expected