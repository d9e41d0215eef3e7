# reedline

Building blocks for an interactive line editor: the edit commands and events
a key binding can trigger, undo grouping rules, command history stores,
stateful history navigation and history-based hints.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Edit commands and events (`reedline.enums`)

`EditCommand` describes one editing action. It is built from an
`EditCommandKind` and the arguments that kind takes, for example
`EditCommand(EditCommandKind.INSERT_CHAR, "a")` or
`EditCommand(EditCommandKind.REPLACE_CHARS, 3, "text")`; wrong argument
counts or types raise `TypeError` or `ValueError`. `edit_type()` tells
whether a command moves the cursor, edits text or undoes/redoes
(`EditType`), and `str()` gives a short description of the command.

`ReedlineEvent` is an action of the editor engine, built the same way from a
`ReedlineEventKind`, e.g. `ReedlineEvent(ReedlineEventKind.MENU, "completion_menu")`
or `ReedlineEvent(ReedlineEventKind.EDIT, [command, ...])`.

`UndoBehavior` tags a buffer change with an `UndoKind` (and, for inserts,
backspaces and deletes, the character involved).
`create_undo_point_after(previous)` decides whether the change starts a new
undo group or joins the previous one, so that typing a word and its trailing
space is undone in one step.

`Signal` is the outcome of reading a line: `Signal(SignalKind.SUCCESS, text)`,
`Signal(SignalKind.CTRL_C)` or `Signal(SignalKind.CTRL_D)`.

All of these values are immutable, comparable and hashable.

## History

`HistoryItem` (`reedline.history.item`) is one run command with optional
context: id, start timestamp, session id, host name, working directory,
duration, exit status and arbitrary JSON-serialisable `more_info`.
`HistoryItem.from_command_line(cmd)` creates one with only the command line.

Every store implements the `History` interface from `reedline.history.base`:
`save`, `load`, `search`, `count`, `count_all`, `update`, `delete`,
`next_session_id` and `sync`. Queries are built with `SearchQuery` and
`SearchFilter`, for example `SearchQuery.last_with_prefix("git ")`,
`SearchQuery.all_that_contain_rev("zip")` or
`SearchQuery.everything(SearchDirection.BACKWARD)`.

Two stores are provided:

- `FileBackedHistory` (`reedline.history.file_backed`) keeps command lines
  in memory, up to a fixed capacity (default 1000), skipping empty lines and
  immediate repeats; ids are positions in the history.
  `FileBackedHistory.with_file(capacity, path)` ties it to a plain text file,
  one entry per line with embedded newlines escaped. `sync()` appends
  unwritten entries under a lock file (`<path>.lock`), merging in what other
  sessions wrote and trimming the file to the capacity. Use it as a context
  manager, or call `close()`, to write unsaved entries. It cannot filter by
  time, host, directory or exit status, nor update or delete entries.
- `SqliteBackedHistory` (`reedline.history.sqlite_backed`) stores full
  `HistoryItem` records in an SQLite database, on disk with
  `with_file(path)` or in memory with `in_memory()`, and can filter by any
  of their fields. Used as a context manager, or with `close()`, it closes
  the database connection.

Stores raise `HistoryFeatureUnsupportedError` for operations they cannot
perform and `HistoryDatabaseError` for storage failures; both derive from
`HistoryError`.

## Navigating history

`HistoryCursor` (`reedline.history.cursor`) walks a history following a
`HistoryNavigationQuery` whose `NavigationKind` is plain browsing
(`NORMAL`), `PREFIX_SEARCH` or `SUBSTRING_SEARCH`. `back` and `forward` move
it, skipping consecutive duplicates unless `skip_dupes=False`;
`string_at_cursor()` returns the entry under the cursor, or `None` when the
cursor is past the newest entry. `navigation()` returns the query.

```python
from reedline.history.base import HistoryNavigationQuery, NavigationKind
from reedline.history.cursor import HistoryCursor
from reedline.history.file_backed import FileBackedHistory
from reedline.history.item import HistoryItem

with FileBackedHistory.with_file(100, "history.txt") as history:
    history.save(HistoryItem.from_command_line("find me as well"))
    history.save(HistoryItem.from_command_line("find me"))

    cursor = HistoryCursor(HistoryNavigationQuery(NavigationKind.PREFIX_SEARCH, "find"))
    cursor.back(history)
    print(cursor.string_at_cursor())  # find me
```

## Hints (`reedline.hinter`)

`DefaultHinter` suggests the rest of the most recent history entry that
starts with the current line, once the line has at least `min_chars`
characters. `handle(line, pos, history, use_ansi_coloring)` returns the hint,
painted with the ANSI SGR parameters in `style` when colouring is on.
`complete_hint()` returns the whole suggestion and `next_hint_token()` only
its leading whitespace and next word. Write your own by subclassing `Hinter`.

## What this package does not do

It has no interactive line reading: there is no terminal input handling, no
raw mode, no screen painting, no prompt, no key bindings or edit modes, no
line buffer that applies `EditCommand`s, no completion menus, no syntax
highlighting and no command to run. It supplies the data types, history
storage, history navigation and hints such an editor is built on.