"""Statement splitting, counting and multi-statement detection."""

from __future__ import annotations

import logging
from itertools import islice

from sql_split.scanner import iter_statements

logger = logging.getLogger(__name__)


def split_bounded(sql: str, limit: int | None = None) -> list[str]:
    """Split *sql* into at most *limit* statements.

    The limit is applied inside the scan: once *limit* statements have been found, the rest of the input is never
    examined. When the input holds fewer statements than *limit*, all of them are returned.

    Args:
        sql: Text holding zero or more statements.
        limit: Maximum number of statements to return, or ``None`` for no limit.

    Returns:
        A prefix of :func:`split_all` of length ``min(limit, count(sql))``.

    Raises:
        ValueError: If *limit* is negative.
    """
    if limit is not None and limit < 0:
        msg = f"limit must be a non-negative integer or None, got {limit!r}"
        raise ValueError(msg)
    if limit == 0:
        return []

    statements = list(islice(iter_statements(sql), limit))
    logger.debug(
        "Split %d statement(s)%s",
        len(statements),
        " (limit reached)" if limit is not None and len(statements) == limit else "",
    )
    return statements


def split_all(sql: str) -> list[str]:
    """Split a multi-statement SQL string into individual statements.

    Statements are returned in order, trimmed of surrounding whitespace, with comments removed and their terminating
    ``;`` kept. Terminators inside quotes or bracketed identifiers do not split. The SQL itself is not parsed or
    validated: malformed input produces some split rather than an error.

    Args:
        sql: Text holding zero or more statements.

    Returns:
        The non-empty statements in order of appearance.

    Example:
        >>> from sql_split import split_all
        >>> split_all("CREATE TABLE [a;b] (c text); SELECT 1; -- done")
        ['CREATE TABLE [a;b] (c text);', 'SELECT 1;']
    """
    return split_bounded(sql)


def count(sql: str) -> int:
    """Return the number of statements in *sql*; equal to ``len(split_all(sql))``."""
    return len(split_all(sql))


def has_multiple(sql: str) -> bool:
    """Return whether *sql* holds more than one statement.

    Scans only until a second statement is found, so this stays cheap on large inputs where :func:`count` would
    walk the whole buffer. Useful as a guard before handing text to an API that silently executes just the first
    statement.
    """
    return len(split_bounded(sql, 2)) > 1
