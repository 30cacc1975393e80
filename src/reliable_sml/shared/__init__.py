"""Shared utilities for SML parsing.

This module provides the error taxonomy, configuration object and logging
helpers used across all processing layers.
"""

from .config import (
    WHITESPACE_CHARACTERS,
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .errors import (
    EncodingError,
    EncodingErrorKind,
    RowSyntaxError,
    SMLParseError,
    StructureError,
    StructureErrorKind,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "WHITESPACE_CHARACTERS",
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "EncodingError",
    "EncodingErrorKind",
    "RowSyntaxError",
    "SMLParseError",
    "StructureError",
    "StructureErrorKind",
    "CorrelationLogger",
    "get_logger",
]
