"""Exception hierarchy for SML parsing.

Every failure is a hard failure of the whole parse. Errors carry 0-based
line and column indices as attributes and render 1-based positions in their
messages for human-readable diagnostics.
"""

from enum import Enum
from typing import Optional


class EncodingErrorKind(Enum):
    """Reasons the byte-to-text layer can reject its input."""

    BAD_BYTE_ORDER_MARK = "bad_byte_order_mark"  # No recognized prefix
    BAD_LENGTH = "bad_length"                    # Body not a whole number of code units
    INVALID_SEQUENCE = "invalid_sequence"        # Undecodable code sequence


class StructureErrorKind(Enum):
    """Reasons the structural decoder can reject a row."""

    MISSING_END = "missing_end"          # Input exhausted before the root closed
    EXTRA_END = "extra_end"              # End row after the root closed
    BAD_ROOT = "bad_root"                # End or attribute row with no open element
    NULL_TITLE = "null_title"            # Element opened with a null title
    NULL_ATTRIBUTE = "null_attribute"    # Attribute row with a null name
    TOO_MANY_ROOTS = "too_many_roots"    # Non-empty row after the root closed


class SMLParseError(Exception):
    """Base exception for every parse failure."""


class EncodingError(SMLParseError):
    """Raised when raw bytes cannot be decoded to text."""

    def __init__(self, kind: EncodingErrorKind, detail: Optional[str] = None) -> None:
        message = f"Encoding error ({kind.value})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.kind = kind
        self.detail = detail


class RowSyntaxError(SMLParseError):
    """Raised when a line cannot be tokenized into a row.

    Attributes:
        offset: 0-based character offset of the first invalid character
        line: 0-based line index, when known
    """

    def __init__(self, offset: int, line: Optional[int] = None) -> None:
        if line is None:
            message = f"Invalid character at column {offset + 1}"
        else:
            message = f"Invalid character at line {line + 1}, column {offset + 1}"
        super().__init__(message)
        self.offset = offset
        self.line = line


class StructureError(SMLParseError):
    """Raised when a row violates the element/attribute structure.

    Attributes:
        kind: Which structural rule was violated
        line: 0-based index of the offending row
    """

    def __init__(self, kind: StructureErrorKind, line: int) -> None:
        super().__init__(f"Structure error ({kind.value}) at line {line + 1}")
        self.kind = kind
        self.line = line
