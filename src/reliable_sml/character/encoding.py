"""ReliableTXT byte-to-text decoding.

ReliableTXT documents always start with a byte-order mark, so the encoding is
never guessed: the prefix selects the codec and anything else is rejected.
Decoded text is split on the line separator only, which means a document
always has at least one (possibly empty) line.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Tuple

from reliable_sml.shared import EncodingError, EncodingErrorKind

LINE_SEPARATOR = "\n"


@dataclass
class EncodingResult:
    """Result of byte-order-mark detection.

    Attributes:
        encoding: Codec name used to decode the body
        bom_length: Number of prefix bytes to skip before decoding
        code_unit_width: Size in bytes of one code unit of the encoding
    """
    encoding: str
    bom_length: int
    code_unit_width: int

    def __post_init__(self) -> None:
        """Validate widths."""
        if self.bom_length <= 0:
            raise ValueError(f"bom_length must be > 0, got {self.bom_length}")
        if self.code_unit_width not in (1, 2, 4):
            raise ValueError(
                f"code_unit_width must be 1, 2 or 4, got {self.code_unit_width}"
            )


class BOMDetector:
    """Byte Order Mark (BOM) detection for the four ReliableTXT encodings."""

    # Checked in order; no pattern is a prefix of an earlier one
    BOM_PATTERNS: ClassVar[List[Tuple[bytes, str, int]]] = [
        (b"\xef\xbb\xbf", "utf-8", 1),
        (b"\xfe\xff", "utf-16-be", 2),
        (b"\xff\xfe", "utf-16-le", 2),
        (b"\x00\x00\xfe\xff", "utf-32-be", 4),
    ]

    def detect(self, data: bytes) -> Optional[EncodingResult]:
        """Detect encoding based on BOM.

        Args:
            data: Byte data to analyze

        Returns:
            EncodingResult if a BOM is recognized, None otherwise
        """
        for bom_bytes, encoding, width in self.BOM_PATTERNS:
            if data.startswith(bom_bytes):
                return EncodingResult(
                    encoding=encoding,
                    bom_length=len(bom_bytes),
                    code_unit_width=width,
                )
        return None


def detect_byte_order_mark(data: bytes) -> Optional[EncodingResult]:
    """Detect the ReliableTXT encoding of ``data`` from its prefix."""
    return BOMDetector().detect(data)


def decode(data: bytes) -> str:
    """Decode a ReliableTXT byte buffer to text.

    Args:
        data: Raw bytes starting with a byte-order mark

    Returns:
        Decoded text without the byte-order mark

    Raises:
        EncodingError: BAD_BYTE_ORDER_MARK if no prefix is recognized,
            BAD_LENGTH if the body is not a whole number of code units,
            INVALID_SEQUENCE if the body contains undecodable sequences
    """
    detected = detect_byte_order_mark(data)
    if detected is None:
        raise EncodingError(EncodingErrorKind.BAD_BYTE_ORDER_MARK)

    body = data[detected.bom_length:]
    if len(body) % detected.code_unit_width != 0:
        raise EncodingError(
            EncodingErrorKind.BAD_LENGTH,
            f"{len(body)} bytes is not a multiple of {detected.code_unit_width} "
            f"for {detected.encoding}",
        )

    try:
        return body.decode(detected.encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(
            EncodingErrorKind.INVALID_SEQUENCE,
            f"{detected.encoding} decoding failed at byte {e.start + detected.bom_length}",
        ) from e


def lines(text: str) -> Iterator[str]:
    """Lazily split text on the line separator.

    Only ``\\n`` separates lines; a carriage return stays part of its line.
    Text without a separator yields exactly one line.
    """
    start = 0
    while True:
        end = text.find(LINE_SEPARATOR, start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1
