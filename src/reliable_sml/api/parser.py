"""Whole-pipeline parsing API.

Each function runs the same pipeline, entering it at a different layer:
bytes are decoded to text, text is split into lines, each line is tokenized
into a row, and rows are fed to one SMLDecoder. The first error aborts the
parse.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from reliable_sml.character import decode, lines
from reliable_sml.shared import ParserConfig, get_logger
from reliable_sml.tree import Element, SMLDecoder

PathType = Union[str, Path]


def parse(data: bytes, config: Optional[ParserConfig] = None) -> Element:
    """Parse a ReliableTXT-encoded SML document.

    Args:
        data: Raw bytes starting with a byte-order mark
        config: Parser configuration, defaults to ParserConfig()

    Returns:
        The root element

    Raises:
        EncodingError: If the bytes cannot be decoded
        RowSyntaxError: If a line cannot be tokenized
        StructureError: If the rows do not form exactly one element tree

    Examples:
        >>> root = parse(b"\\xef\\xbb\\xbfRoot\\nx y -\\nEnd")
        >>> root.get_values("x")
        ('y', None)
    """
    config = config or ParserConfig()
    logger = get_logger(
        __name__, config.correlation_id, "parse", config.enable_diagnostics
    )
    logger.debug("Starting byte parse", extra={"byte_count": len(data)})

    return parse_lines(lines(decode(data)), config)


def parse_string(text: str, config: Optional[ParserConfig] = None) -> Element:
    """Parse already-decoded SML text.

    Args:
        text: Document text; lines are separated by ``\\n``
        config: Parser configuration, defaults to ParserConfig()

    Returns:
        The root element
    """
    return parse_lines(lines(text), config)


def parse_lines(
    source_lines: Iterable[str], config: Optional[ParserConfig] = None
) -> Element:
    """Parse SML from an iterable of lines.

    Lines are consumed lazily, so a generator is never materialized.

    Args:
        source_lines: Lines of text without line separators
        config: Parser configuration, defaults to ParserConfig()

    Returns:
        The root element
    """
    config = config or ParserConfig()
    logger = get_logger(
        __name__, config.correlation_id, "parse_lines", config.enable_diagnostics
    )

    decoder = SMLDecoder(config)
    for line in source_lines:
        decoder.add_line(line)
    root = decoder.finish()

    logger.debug(
        "Parse completed",
        extra={"title": root.title, "line_count": decoder.line_count}
    )
    return root


def parse_file(path: PathType, config: Optional[ParserConfig] = None) -> Element:
    """Parse a ReliableTXT-encoded SML file.

    Args:
        path: Path to the file
        config: Parser configuration, defaults to ParserConfig()

    Returns:
        The root element

    Raises:
        OSError: If the file cannot be read
    """
    return parse(Path(path).read_bytes(), config)
