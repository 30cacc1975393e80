"""WSV row tokenization with an explicit state machine.

This module converts a single line of text into a row of optional string
cells. Every character is fed through exactly one state handler, and every
handler either changes state, buffers the character, emits a cell, stops at a
comment, or raises at the offending offset.
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from reliable_sml.shared import WHITESPACE_CHARACTERS, RowSyntaxError

Cell = Optional[str]
Row = List[Cell]

QUOTE = '"'
NULL_SENTINEL = "-"
COMMENT_START = "#"
NEWLINE_ESCAPE = "/"


class RowTokenizerState(Enum):
    """State machine states for row tokenization."""

    READY = auto()           # Between cells
    NULL = auto()            # Bare '-' seen
    UNQUOTED = auto()        # Inside an unquoted value
    QUOTED = auto()          # Inside a quoted value
    QUOTED_END = auto()      # Just after a closing quote
    QUOTED_NEWLINE = auto()  # '/' seen after a closing quote


class RowTokenizer:
    """Tokenizer turning one line of WSV text into a row of cells.

    The tokenizer is reusable; every call to ``tokenize`` starts from a
    fresh state.
    """

    def __init__(self) -> None:
        self._handlers: Dict[RowTokenizerState, Callable[[str], None]] = {
            RowTokenizerState.READY: self._process_ready,
            RowTokenizerState.NULL: self._process_null,
            RowTokenizerState.UNQUOTED: self._process_unquoted,
            RowTokenizerState.QUOTED: self._process_quoted,
            RowTokenizerState.QUOTED_END: self._process_quoted_end,
            RowTokenizerState.QUOTED_NEWLINE: self._process_quoted_newline,
        }
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset tokenizer state for a new line."""
        self.state = RowTokenizerState.READY
        self.cell_buffer: List[str] = []
        self.row: Row = []
        self.offset = 0
        self.comment_reached = False
        self.line_index: Optional[int] = None

    def tokenize(self, line: str, line_index: Optional[int] = None) -> Row:
        """Tokenize one line into a row.

        Args:
            line: A single line of text without its line separator
            line_index: Optional 0-based line index used in error reports

        Returns:
            List of cells, where None marks a null value

        Raises:
            RowSyntaxError: At the offset of the first invalid character
        """
        self._reset_state()
        self.line_index = line_index

        for offset, char in enumerate(line):
            self.offset = offset
            self._handlers[self.state](char)
            if self.comment_reached:
                break

        self._finalize_row(len(line))
        return self.row

    def _fail(self) -> None:
        raise RowSyntaxError(self.offset, self.line_index)

    def _emit_value(self) -> None:
        self.row.append("".join(self.cell_buffer))
        self.cell_buffer = []
        self.state = RowTokenizerState.READY

    def _emit_null(self) -> None:
        self.row.append(None)
        self.state = RowTokenizerState.READY

    def _process_ready(self, char: str) -> None:
        if char in WHITESPACE_CHARACTERS:
            return
        if char == QUOTE:
            self.state = RowTokenizerState.QUOTED
        elif char == NULL_SENTINEL:
            self.state = RowTokenizerState.NULL
        elif char == COMMENT_START:
            self.comment_reached = True
        else:
            self.cell_buffer.append(char)
            self.state = RowTokenizerState.UNQUOTED

    def _process_null(self, char: str) -> None:
        if char == QUOTE:
            self._fail()
        elif char == COMMENT_START:
            self.comment_reached = True
        elif char in WHITESPACE_CHARACTERS:
            self._emit_null()
        else:
            # '-' followed by a value character starts a literal such as '-1'
            self.cell_buffer.extend((NULL_SENTINEL, char))
            self.state = RowTokenizerState.UNQUOTED

    def _process_unquoted(self, char: str) -> None:
        if char == QUOTE:
            self._fail()
        elif char == COMMENT_START:
            self.comment_reached = True
        elif char in WHITESPACE_CHARACTERS:
            self._emit_value()
        else:
            self.cell_buffer.append(char)

    def _process_quoted(self, char: str) -> None:
        if char == QUOTE:
            self.state = RowTokenizerState.QUOTED_END
        else:
            self.cell_buffer.append(char)

    def _process_quoted_end(self, char: str) -> None:
        if char == QUOTE:
            self.cell_buffer.append(QUOTE)
            self.state = RowTokenizerState.QUOTED
        elif char == NEWLINE_ESCAPE:
            self.state = RowTokenizerState.QUOTED_NEWLINE
        elif char == COMMENT_START:
            self.comment_reached = True
        elif char in WHITESPACE_CHARACTERS:
            self._emit_value()
        else:
            self._fail()

    def _process_quoted_newline(self, char: str) -> None:
        if char == QUOTE:
            self.cell_buffer.append("\n")
            self.state = RowTokenizerState.QUOTED
        else:
            self._fail()

    def _finalize_row(self, line_length: int) -> None:
        """Flush whatever cell is pending at the end of the line or comment."""
        if self.state in (RowTokenizerState.QUOTED, RowTokenizerState.QUOTED_NEWLINE):
            self.offset = line_length
            self._fail()
        elif self.state == RowTokenizerState.NULL:
            self._emit_null()
        elif self.state in (RowTokenizerState.UNQUOTED, RowTokenizerState.QUOTED_END):
            self._emit_value()


def parse_row(line: str, line_index: Optional[int] = None) -> Row:
    """Tokenize one line of WSV text.

    Args:
        line: A single line of text without its line separator
        line_index: Optional 0-based line index used in error reports

    Returns:
        List of cells, where None marks a null value

    Raises:
        RowSyntaxError: At the offset of the first invalid character

    Examples:
        >>> parse_row('x "a b" -')
        ['x', 'a b', None]
        >>> parse_row('  # only a comment')
        []
    """
    return RowTokenizer().tokenize(line, line_index)
