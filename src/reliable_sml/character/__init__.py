"""Character processing layer for SML parsing.

This module provides ReliableTXT byte-order-mark detection, decoding of raw
bytes to text, and splitting of text into lines.
"""

from .encoding import (
    LINE_SEPARATOR,
    BOMDetector,
    EncodingResult,
    decode,
    detect_byte_order_mark,
    lines,
)

__all__ = [
    "LINE_SEPARATOR",
    "BOMDetector",
    "EncodingResult",
    "decode",
    "detect_byte_order_mark",
    "lines",
]
