"""Row tokenization for SML parsing.

This module converts single lines of WSV text into rows of optional string
cells using an explicit character-level state machine.

Key Components:
    RowTokenizer: Reusable tokenizer class driving the state machine
    RowTokenizerState: State machine states
    parse_row: Convenience function tokenizing one line
"""

from .tokenizer import (
    WHITESPACE_CHARACTERS,
    Cell,
    Row,
    RowTokenizer,
    RowTokenizerState,
    parse_row,
)

__all__ = [
    "WHITESPACE_CHARACTERS",
    "Cell",
    "Row",
    "RowTokenizer",
    "RowTokenizerState",
    "parse_row",
]
