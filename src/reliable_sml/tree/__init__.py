"""Tree building for SML parsing.

This module turns rows of cells into an SML document tree using a stack of
open elements.

Key Components:
    SMLDecoder: Incremental decoder fed one row at a time
    Element: Closed element with attribute and element children
    Attribute: Named attribute with optional values
    decode_rows: Whole-document decoding of a row sequence
"""

from .builder import (
    Attribute,
    Element,
    Node,
    SMLDecoder,
    decode_rows,
)

__all__ = [
    "Attribute",
    "Element",
    "Node",
    "SMLDecoder",
    "decode_rows",
]
