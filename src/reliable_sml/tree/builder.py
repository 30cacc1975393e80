"""Structural decoding of WSV rows into an SML element tree.

This module implements the stack-based tree builder. A single step function,
``SMLDecoder.add_row``, holds every structural rule; whole-document decoding
only pumps rows through it, so both modes share identical behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from reliable_sml.shared import (
    ParserConfig,
    StructureError,
    StructureErrorKind,
    get_logger,
)
from reliable_sml.tokenization import Cell, Row, parse_row


@dataclass(frozen=True)
class Attribute:
    """Named attribute with an ordered list of optional values."""

    name: str
    values: Tuple[Cell, ...] = ()

    def __post_init__(self) -> None:
        """Validate attribute values."""
        if self.name is None:
            raise ValueError("Attribute name cannot be null")

    @property
    def value(self) -> Cell:
        """Get the first value, or None if there is none."""
        return self.values[0] if self.values else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert attribute to dictionary representation."""
        return {"name": self.name, "values": list(self.values)}


@dataclass(frozen=True)
class Element:
    """Closed SML element with its attributes and nested elements in order."""

    title: str
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Validate element values."""
        if self.title is None:
            raise ValueError("Element title cannot be null")

    @property
    def attributes(self) -> List[Attribute]:
        """Get direct attribute children in document order."""
        return [child for child in self.children if isinstance(child, Attribute)]

    @property
    def elements(self) -> List["Element"]:
        """Get direct element children in document order."""
        return [child for child in self.children if isinstance(child, Element)]

    def find_child(self, title: str) -> Optional["Element"]:
        """Find first direct child element with matching title."""
        for child in self.elements:
            if child.title == title:
                return child
        return None

    def find_children(self, title: str) -> List["Element"]:
        """Find all direct child elements with matching title."""
        return [child for child in self.elements if child.title == title]

    def find(self, title: str) -> Optional["Element"]:
        """Find first descendant element with matching title.

        Direct children are checked before recursing into each child in order.
        """
        found = self.find_child(title)
        if found is not None:
            return found

        for child in self.elements:
            found = child.find(title)
            if found is not None:
                return found

        return None

    def find_all(self, title: str) -> List["Element"]:
        """Find all descendant elements with matching title in document order."""
        results = []
        for child in self.elements:
            if child.title == title:
                results.append(child)
            results.extend(child.find_all(title))
        return results

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """Get the first direct attribute with matching name."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def get_values(self, name: str, default: Optional[Tuple[Cell, ...]] = None
                   ) -> Optional[Tuple[Cell, ...]]:
        """Get the values of the first direct attribute with matching name."""
        attribute = self.get_attribute(name)
        if attribute is None:
            return default
        return attribute.values

    def has_attribute(self, name: str) -> bool:
        """Check if element has a direct attribute with this name."""
        return self.get_attribute(name) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        return {
            "title": self.title,
            "children": [child.to_dict() for child in self.children],
        }


Node = Union[Element, Attribute]


@dataclass
class _PendingElement:
    """Element still on the decoder stack; frozen into an Element on close."""

    title: str
    children: List[Node] = field(default_factory=list)

    def close(self) -> Element:
        return Element(title=self.title, children=tuple(self.children))


class SMLDecoder:
    """Incremental decoder building one SML document from rows.

    Rows are supplied one at a time with ``add_row`` (or ``add_line`` for raw
    text). The decoder owns its stack of open elements; the completed root is
    returned by the step that closes it and handed to the caller.

    Example:
        >>> decoder = SMLDecoder()
        >>> decoder.add_row(["Root"]) is None
        True
        >>> decoder.add_row(["End"])
        Element(title='Root', children=())
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        """Initialize decoder.

        Args:
            config: Parser configuration, defaults to ParserConfig()
        """
        self.config = config or ParserConfig()
        self.logger = get_logger(
            __name__,
            self.config.correlation_id,
            "sml_decoder",
            self.config.enable_diagnostics,
        )

        self._element_stack: List[_PendingElement] = []
        self._root: Optional[Element] = None
        self._line_count = 0

    @property
    def root(self) -> Optional[Element]:
        """Completed root element, or None while the document is open."""
        return self._root

    @property
    def is_complete(self) -> bool:
        """Check whether the root element has been closed."""
        return self._root is not None

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._element_stack)

    @property
    def line_count(self) -> int:
        """Number of rows consumed so far."""
        return self._line_count

    def add_line(self, line: str) -> Optional[Element]:
        """Tokenize one line of text and feed the resulting row.

        Raises:
            RowSyntaxError: If the line cannot be tokenized
            StructureError: If the row violates the document structure
        """
        return self.add_row(parse_row(line, self._line_count))

    def add_row(self, row: Row) -> Optional[Element]:
        """Apply one row to the document.

        Args:
            row: Cells of one line, None marking a null value

        Returns:
            The completed root element when this row closes it, else None

        Raises:
            StructureError: If the row violates the document structure
        """
        line = self._line_count
        self._line_count += 1

        if not row:
            return None

        if self._root is not None:
            if len(row) == 1 and self._is_end_row(row):
                raise StructureError(StructureErrorKind.EXTRA_END, line)
            raise StructureError(StructureErrorKind.TOO_MANY_ROOTS, line)

        if len(row) == 1:
            if self._is_end_row(row):
                return self._close_element(line)
            self._open_element(row[0], line)
            return None

        self._add_attribute(row, line)
        return None

    def finish(self) -> Element:
        """Return the completed root element.

        Raises:
            StructureError: MISSING_END if the root has not been closed
        """
        if self._root is None:
            raise StructureError(StructureErrorKind.MISSING_END, self._line_count)
        return self._root

    def _is_end_row(self, row: Row) -> bool:
        cell = row[0]
        return cell is not None and self.config.is_end_keyword(cell)

    def _open_element(self, title: Cell, line: int) -> None:
        if title is None:
            raise StructureError(StructureErrorKind.NULL_TITLE, line)
        self._element_stack.append(_PendingElement(title))

    def _close_element(self, line: int) -> Optional[Element]:
        if not self._element_stack:
            raise StructureError(StructureErrorKind.BAD_ROOT, line)

        element = self._element_stack.pop().close()
        if self._element_stack:
            self._element_stack[-1].children.append(element)
            return None

        self._root = element
        self.logger.debug(
            "Root element closed",
            extra={"title": element.title, "line": line}
        )
        return element

    def _add_attribute(self, row: Row, line: int) -> None:
        name = row[0]
        if name is None:
            raise StructureError(StructureErrorKind.NULL_ATTRIBUTE, line)
        if not self._element_stack:
            raise StructureError(StructureErrorKind.BAD_ROOT, line)
        self._element_stack[-1].children.append(Attribute(name, tuple(row[1:])))


def decode_rows(rows: Iterable[Row], config: Optional[ParserConfig] = None) -> Element:
    """Decode a whole document from its rows.

    Args:
        rows: Rows in line order
        config: Parser configuration, defaults to ParserConfig()

    Returns:
        The root element

    Raises:
        StructureError: At the first row violating the document structure,
            or MISSING_END if the rows end before the root closes
    """
    decoder = SMLDecoder(config)
    for row in rows:
        decoder.add_row(row)
    return decoder.finish()
