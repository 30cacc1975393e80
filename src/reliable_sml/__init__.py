"""Reliable SML.

A strict parser for SML documents: ReliableTXT bytes are decoded by their
byte-order mark, each line is tokenized as a WSV row, and the rows are built
into a single element tree. Any malformed input fails the whole parse.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Incremental decoding - SMLDecoder, parse_row()
"""

__version__ = "0.1.0"
__author__ = "Reliable SML Team"

# Level 1: Simple functions
from .api import parse, parse_file, parse_lines, parse_string

# Level 2: Incremental decoding
from .tokenization import parse_row
from .tree import Attribute, Element, SMLDecoder

# Configuration and errors
from .shared import (
    ConfigValidationError,
    EncodingError,
    EncodingErrorKind,
    ParserConfig,
    RowSyntaxError,
    SMLParseError,
    StructureError,
    StructureErrorKind,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_file",
    "parse_lines",
    "parse_string",

    # Level 2: Incremental decoding
    "parse_row",
    "SMLDecoder",

    # Result objects and data structures
    "Attribute",
    "Element",

    # Configuration and errors
    "ParserConfig",
    "ConfigValidationError",
    "SMLParseError",
    "EncodingError",
    "EncodingErrorKind",
    "RowSyntaxError",
    "StructureError",
    "StructureErrorKind",
]
