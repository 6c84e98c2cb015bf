"""SQLite Scripts Recipebook -- interactive examples for running multi-statement SQL one statement at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import marimo

if TYPE_CHECKING:
    import sqlite3
    import types
    from collections.abc import Callable, Iterator

__generated_with = "0.19.11"
app = marimo.App()


@app.cell
def _(mo: types.ModuleType):
    mo.md("""
    # SQLite Scripts Recipebook

    Python's `sqlite3.Connection.execute` refuses more than one statement, and
    many embedded SQLite bindings silently run only the first.  These recipes
    use **sql_split** to hand a script to SQLite one statement at a time.

    **How to use this notebook:**

    - `marimo run recipes/sqlite_scripts.py` -- read-only app mode
    - `marimo edit recipes/sqlite_scripts.py` -- interactive editing mode
    """)
    return


@app.cell
def _():
    import sqlite3

    import marimo as mo

    from sql_split import count, has_multiple, iter_statements, split_all, split_bounded

    return count, has_multiple, iter_statements, mo, split_all, split_bounded, sqlite3


@app.cell
def _(
    mo: types.ModuleType,
    split_all: Callable[[str], list[str]],
    sqlite3: types.ModuleType,
):
    # --- Recipe: Run a migration script inside one transaction ---
    _migration = """
    -- schema
    CREATE TABLE departments (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
    CREATE TABLE [audit;log] (entry TEXT);

    /* seed data; the terminators in the strings below are not boundaries */
    INSERT INTO departments (name) VALUES ('R&D; west'), ('Sales'), ('O''Brien''s team');
    INSERT INTO [audit;log] VALUES ('seeded; 3 rows');
    """

    _conn: sqlite3.Connection = sqlite3.connect(":memory:")
    _statements = split_all(_migration)
    with _conn:
        for _stmt in _statements:
            _conn.execute(_stmt)

    _rows = _conn.execute("SELECT id, name FROM departments ORDER BY id").fetchall()
    _conn.close()

    _stmt_rows = "\n".join(f"| {_i + 1} | `{_s}` |" for _i, _s in enumerate(_statements))
    _data_rows = "\n".join(f"| {_id} | {_name} |" for _id, _name in _rows)
    mo.md(
        f"""
        ## Recipe 1: Run a Migration Script in a Transaction

        `split_all` strips comments and splits on terminators that are not
        inside quotes or bracketed identifiers.  Each statement is executed in
        order inside one `with conn:` transaction.

        | # | Statement |
        |---|-----------|
        {_stmt_rows}

        **Resulting rows:**

        | id | name |
        |----|------|
        {_data_rows}
        """
    )
    return


@app.cell
def _(
    has_multiple: Callable[[str], bool],
    mo: types.ModuleType,
):
    # --- Recipe: Guard a single-statement API ---
    _inputs = [
        "SELECT * FROM users WHERE name = 'a;b'",
        "SELECT 1; -- trailing note",
        "DELETE FROM sessions; DROP TABLE users",
        "SELECT [weird;column] FROM t; SELECT 2",
    ]

    _rows = "\n".join(f"| `{_sql}` | {'rejected' if has_multiple(_sql) else 'ok'} |" for _sql in _inputs)
    mo.md(
        f"""
        ## Recipe 2: Guard a Single-Statement API

        `has_multiple` stops scanning as soon as it finds a second statement,
        so it is cheap enough to call on every request before passing text to
        an API that would silently ignore everything after the first
        statement.

        | Input | Verdict |
        |-------|---------|
        {_rows}
        """
    )
    return


@app.cell
def _(
    iter_statements: Callable[[str], Iterator[str]],
    mo: types.ModuleType,
    sqlite3: types.ModuleType,
):
    # --- Recipe: Skip shell meta-commands ---
    _script = """.headers on
.mode column
.print loading
CREATE TABLE t (a INTEGER);
INSERT INTO t VALUES (1), (2), (3);
SELECT sum(a) FROM t;
"""

    _conn: sqlite3.Connection = sqlite3.connect(":memory:")
    _executed: list[str] = []
    _skipped: list[str] = []
    _result = None
    for _stmt in iter_statements(_script):
        if _stmt.startswith("."):
            _skipped.append(_stmt)
            continue
        _executed.append(_stmt)
        _result = _conn.execute(_stmt).fetchall()
    _conn.close()

    mo.md(
        f"""
        ## Recipe 3: Skip Shell Meta-Commands

        Scripts written for the `sqlite3` shell mix SQL with dot-commands.
        A dot-command must start right at the beginning of a statement: at
        the top of the script, or straight after the previous dot-command or
        `;` with nothing in between. It ends at the end of its line and
        never needs a `;`, so it comes out as its own statement and is easy
        to filter.

        **Executed:** {', '.join(f'`{_s}`' for _s in _executed)}

        **Skipped:** {', '.join(f'`{_s}`' for _s in _skipped)}

        **Last result:** `{_result}`
        """
    )
    return


@app.cell
def _(
    count: Callable[[str], int],
    mo: types.ModuleType,
    split_bounded: Callable[[str, int | None], list[str]],
):
    # --- Recipe: Preview the head of a large dump ---
    _dump = "\n".join(f"INSERT INTO events VALUES ({_i}, 'payload; {_i}');" for _i in range(5_000))

    _head = split_bounded(_dump, 3)
    _rows = "\n".join(f"| `{_s}` |" for _s in _head)
    mo.md(
        f"""
        ## Recipe 4: Preview the Head of a Large Dump

        `split_bounded` stops scanning once it has enough statements, so a
        preview of a large dump costs only as much as the statements shown.
        `count` walks the whole input.

        **Total statements:** {count(_dump)}

        | First statements |
        |------------------|
        {_rows}
        """
    )
    return


if __name__ == "__main__":
    app.run()
