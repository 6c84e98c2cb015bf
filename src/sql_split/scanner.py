"""Character-level statement scanner for SQLite-flavoured SQL.

The scanner walks the input once, left to right, with one character of lookback. It tracks just enough lexical
context to know where a statement ends:

* **Enclosures** -- ``'...'``, ``"..."``, ```...``` and ``[...]``. A terminator inside an enclosure is ordinary text.
  An open enclosure closes on its own opening character or on ``]``, whichever comes first. A doubled quote
  (``'it''s'``) is read as *close, reopen*, which lands on the same boundaries as a real escape because nothing
  significant can sit between the two quote characters.
* **Comments** -- ``-- ...`` up to the end of the line and ``/* ... */``. Comment text, including the newline that
  ends a line comment, is dropped from the output.
* **Meta-commands** -- a statement whose very first character is ``.`` (``.dump``, ``.tables``) is a line-oriented
  shell directive. It ends at the next newline or at the start of a block comment, whichever comes first. A ``.``
  preceded by anything, whitespace included, is ordinary text.
* **Terminators** -- an unquoted, uncommented ``;`` ends the statement and stays part of it.

Backslash escapes are not recognised; SQLite does not have them.

Malformed input never raises, but some inputs give surprising splits:

* An unterminated enclosure swallows the rest of the input into the final statement.
* An unterminated comment swallows the rest of the input entirely. This includes a comment that opens before any real
  content and never sees a newline: ``"-- note;SELECT 1;"`` yields no statements at all.
* Quote and bracket characters open an enclosure even inside a comment, and the comment cannot end until that
  enclosure closes. ``"-- don't\\nSELECT 1;"`` therefore yields nothing, while balanced quotes in comments are
  harmless.
* ``]`` closes a quoted string early, so ``'a]b;c'`` splits after ``b;``.

Scans that end inside a comment or an enclosure are reported on the ``sql_split.scanner`` logger at DEBUG level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Literal, TypeAlias, cast

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

Enclosure: TypeAlias = Literal["'", '"', "`", "["]

TERMINATOR: Final = ";"
META_PREFIX: Final = "."
BRACKET_CLOSE: Final = "]"
_ENCLOSURE_OPENERS: Final[frozenset[str]] = frozenset({"'", '"', "`", "["})


@dataclass(slots=True)
class ScanState:
    """Mutable state threaded through a single scan.

    A fresh instance is created for every scan and never escapes it, so concurrent scans of independent inputs need
    no coordination.

    Attributes:
        buffer: Characters of the statement currently being built. Comment text is never appended.
        enclosure: The character that opened the current quoted or bracketed span, or ``None`` outside one.
        previous_char: The character seen immediately before the current one, comment text included.
        in_line_comment: Inside a ``-- ...`` comment.
        in_block_comment: Inside a ``/* ... */`` comment.
        in_meta_command: The current statement started with ``.``.
        boundary_reached: One-shot flag set when the current character completes a statement; cleared by
            :meth:`take_statement`.
    """

    buffer: list[str] = field(default_factory=list)
    enclosure: Enclosure | None = None
    previous_char: str | None = None
    in_line_comment: bool = False
    in_block_comment: bool = False
    in_meta_command: bool = False
    boundary_reached: bool = False

    @property
    def in_comment(self) -> bool:
        """Whether the scanner is inside either kind of comment."""
        return self.in_line_comment or self.in_block_comment

    def feed(self, char: str) -> None:
        """Advance the state machine by one character.

        After this returns, :attr:`boundary_reached` tells the caller whether *char* completed a statement.
        """
        if not self.in_comment:
            self.buffer.append(char)

        if self.enclosure is not None:
            if char == BRACKET_CLOSE or char == self.enclosure:
                self.enclosure = None
        elif char == META_PREFIX:
            if len(self.buffer) == 1 and not self.in_block_comment:
                self.in_meta_command = True
        elif char == "*":
            if not self.in_comment and self.previous_char == "/":
                self.in_block_comment = True
                self._drop_opener()
                # Meta-commands are single-line and cannot hold a block comment.
                if self.in_meta_command:
                    self.boundary_reached = True
        elif char == "/":
            if self.in_block_comment and self.previous_char == "*":
                self.in_block_comment = False
        elif char == "\n":
            if self.in_meta_command:
                self.boundary_reached = True
                self.in_meta_command = False
            if self.in_line_comment:
                self.in_line_comment = False
        elif char == "-":
            if not self.in_comment and self.previous_char == "-":
                self.in_line_comment = True
                del self.buffer[-2:]
        elif char == TERMINATOR:
            if not self.in_comment:
                self.boundary_reached = True
        elif char in _ENCLOSURE_OPENERS:
            self.enclosure = cast("Enclosure", char)

        self.previous_char = char

    def take_statement(self) -> str:
        """Return the trimmed buffer and start a new statement.

        Clears the buffer and the :attr:`boundary_reached` flag. The returned text may be empty or a lone ``;``;
        callers decide whether to emit it.
        """
        text = "".join(self.buffer).strip()
        self.buffer.clear()
        self.boundary_reached = False
        return text

    def _drop_opener(self) -> None:
        # A "/" that closed the previous block comment was never buffered; only the "*" is.
        if self.buffer[-2:] == ["/", "*"]:
            del self.buffer[-2:]
        else:
            del self.buffer[-1:]


def _is_statement(text: str) -> bool:
    return bool(text) and text != TERMINATOR


def iter_statements(sql: str) -> Iterator[str]:
    """Lazily yield the statements in *sql*, in order of appearance.

    Each statement is yielded as soon as its boundary is recognized, so abandoning the iterator stops the scan and
    leaves the rest of the input unexamined. Statements are trimmed of surrounding whitespace and keep their
    terminating ``;``. Empty statements (whitespace, comments, or stray terminators) are never yielded. Text after
    the last terminator is yielded as a final statement.

    Args:
        sql: Text holding zero or more statements.

    Yields:
        Each non-empty, trimmed statement.

    Example:
        >>> from sql_split import iter_statements
        >>> it = iter_statements("CREATE TABLE t (a); INSERT INTO t VALUES (';');")
        >>> next(it)
        'CREATE TABLE t (a);'
        >>> next(it)
        "INSERT INTO t VALUES (';');"
    """
    state = ScanState()
    for char in sql:
        state.feed(char)
        if state.boundary_reached:
            text = state.take_statement()
            if _is_statement(text):
                yield text

    _log_unterminated(state)
    text = state.take_statement()
    if text:
        yield text


def _log_unterminated(state: ScanState) -> None:
    if state.in_block_comment:
        logger.debug("Input ended inside an unterminated block comment; comment text discarded")
    elif state.in_line_comment:
        logger.debug("Input ended inside a line comment with no closing newline; comment text discarded")
    if state.enclosure is not None:
        logger.debug(
            "Input ended inside an unterminated %r enclosure; remainder kept in the final statement",
            state.enclosure,
        )
