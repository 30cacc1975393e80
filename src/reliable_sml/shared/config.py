"""Configuration for SML parsing.

The configuration object is a frozen dataclass shared by every layer, so a
single instance can be passed to the decoder and the API functions alike.
"""

import json
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional

DEFAULT_END_KEYWORD = "end"

# Unicode White_Space property
WHITESPACE_CHARACTERS = frozenset(
    "\u0009\u000a\u000b\u000c\u000d\u0020\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Characters that would make the end keyword impossible to write as one cell
_RESERVED_KEYWORD_CHARACTERS = frozenset('"#')

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only, leaving every other character as is."""
    return value.translate(_ASCII_LOWER)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the row tokenizer, structural decoder and API.

    Attributes:
        correlation_id: Optional ID attached to every log record
        end_keyword: Cell value that closes an element, compared ignoring ASCII case
        enable_diagnostics: Emit debug log records while decoding
    """

    correlation_id: Optional[str] = None
    end_keyword: str = DEFAULT_END_KEYWORD
    enable_diagnostics: bool = True

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if not isinstance(self.end_keyword, str) or not self.end_keyword:
            raise ConfigValidationError(
                "end_keyword cannot be empty", field_name="end_keyword"
            )
        if any(char in WHITESPACE_CHARACTERS for char in self.end_keyword):
            raise ConfigValidationError(
                "end_keyword cannot contain whitespace",
                field_name="end_keyword",
                suggestions=["Use a single word such as 'End'"],
            )
        if _RESERVED_KEYWORD_CHARACTERS.intersection(self.end_keyword):
            raise ConfigValidationError(
                "end_keyword cannot contain '\"' or '#'", field_name="end_keyword"
            )
        if self.end_keyword == "-":
            raise ConfigValidationError(
                "end_keyword cannot be the null sentinel", field_name="end_keyword"
            )

    def is_end_keyword(self, value: str) -> bool:
        """Check whether a cell value closes an element."""
        return _ascii_lower(value) == _ascii_lower(self.end_keyword)

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig().override(end_keyword="Ende")
            >>> config.end_keyword
            'Ende'
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Unknown keys raise ConfigValidationError rather than being ignored.
        """
        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
