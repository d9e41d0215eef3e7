"""Command history items, queries, file and SQLite stores, and cursors."""