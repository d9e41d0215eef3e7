from datetime import timedelta

import pytest

from reedline.history.base import (
    CommandLineSearch,
    History,
    HistoryError,
    HistoryFeatureUnsupportedError,
    HistoryNavigationQuery,
    NavigationKind,
    SearchDirection,
    SearchFilter,
    SearchKind,
    SearchQuery,
)
from reedline.history.file_backed import FileBackedHistory
from reedline.history.item import HistoryItem


def create_item(session, cwd, cmd, exit_status):
    return HistoryItem(
        command_line=cmd,
        session_id=session,
        hostname="foohost",
        cwd=cwd,
        duration=timedelta(milliseconds=1000),
        exit_status=exit_status,
    )


@pytest.fixture
def history():
    hist = FileBackedHistory()
    hist.save(create_item(1, "/", "dummy", 0))
    hist.save(create_item(1, "/home/me", "cd ~/Downloads", 0))
    hist.save(create_item(1, "/home/me/Downloads", "unzp foo.zip", 1))
    hist.save(create_item(1, "/home/me/Downloads", "unzip foo.zip", 0))
    hist.save(create_item(1, "/home/me/Downloads", "cd foo", 0))
    hist.save(create_item(1, "/home/me/Downloads/foo", "ls", 0))
    hist.save(create_item(1, "/home/me/Downloads/foo", "ls -alh", 0))
    hist.save(create_item(1, "/home/me/Downloads/foo", "cat x.txt", 0))
    hist.save(create_item(1, "/home/me", "cd /etc/nginx", 0))
    hist.save(create_item(1, "/etc/nginx", "ls -l", 0))
    hist.save(create_item(1, "/etc/nginx", "vim nginx.conf", 0))
    hist.save(create_item(1, "/etc/nginx", "vim htpasswd", 0))
    hist.save(create_item(1, "/etc/nginx", "cat nginx.conf", 0))
    return hist


def assert_returned(history, result, wanted):
    assert result == [history.load(i) for i in wanted]


def test_count_all(history):
    assert history.count_all() == 13


def test_get_latest(history):
    res = history.search(SearchQuery.last_with_search(SearchFilter.anything()))
    assert_returned(history, res, [12])
    assert res[0].command_line == "cat nginx.conf"


def test_get_earliest(history):
    query = SearchQuery.everything(SearchDirection.FORWARD)
    query.limit = 1
    assert_returned(history, history.search(query), [0])


def test_search_prefix(history):
    query = SearchQuery.everything(SearchDirection.BACKWARD)
    query.filter = SearchFilter.from_text_search(
        CommandLineSearch(SearchKind.PREFIX, "ls ")
    )
    assert_returned(history, history.search(query), [9, 6])


def test_search_includes(history):
    query = SearchQuery.everything(SearchDirection.FORWARD)
    query.filter = SearchFilter.from_text_search(
        CommandLineSearch(SearchKind.SUBSTRING, "foo.zip")
    )
    assert_returned(history, history.search(query), [2, 3])


def test_search_includes_limit(history):
    query = SearchQuery.everything(SearchDirection.FORWARD)
    query.filter = SearchFilter.from_text_search(
        CommandLineSearch(SearchKind.SUBSTRING, "c")
    )
    query.limit = 2
    assert_returned(history, history.search(query), [1, 4])


def test_all_that_contain_rev(history):
    res = history.search(SearchQuery.all_that_contain_rev("nginx"))
    assert [e.command_line for e in res] == [
        "cat nginx.conf",
        "vim nginx.conf",
        "cd /etc/nginx",
    ]


def test_last_with_prefix_query_fields():
    query = SearchQuery.last_with_prefix("git")
    assert query.direction is SearchDirection.BACKWARD
    assert query.limit == 1
    assert query.filter.command_line == CommandLineSearch(SearchKind.PREFIX, "git")
    assert query.start_id is None and query.end_id is None


def test_everything_has_no_constraints():
    query = SearchQuery.everything(SearchDirection.FORWARD)
    assert query.limit is None
    assert query.filter == SearchFilter.anything()
    assert query.direction is SearchDirection.FORWARD


def test_from_text_search_only_sets_command_line():
    search = CommandLineSearch(SearchKind.EXACT, "ls")
    flt = SearchFilter.from_text_search(search)
    assert flt == SearchFilter(command_line=search)
    assert flt.hostname is None and flt.exit_successful is None


def test_navigation_query_equality():
    first = HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, "find")
    assert first == HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, "find")
    assert first != HistoryNavigationQuery(NavigationKind.SUBSTRING_SEARCH, "find")


def test_history_is_abstract():
    with pytest.raises(TypeError):
        History()


def test_feature_unsupported_is_history_error():
    err = HistoryFeatureUnsupportedError("FileBackedHistory", "removing entries")
    assert isinstance(err, HistoryError)
    assert err.feature == "removing entries"
    assert "FileBackedHistory" in str(err)