"""Public parsing API for SML documents."""

from .parser import parse, parse_file, parse_lines, parse_string

__all__ = [
    "parse",
    "parse_file",
    "parse_lines",
    "parse_string",
]
