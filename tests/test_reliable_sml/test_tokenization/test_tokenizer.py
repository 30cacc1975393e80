"""Tests for the WSV row tokenizer state machine."""

import pytest

from reliable_sml.shared import RowSyntaxError
from reliable_sml.tokenization import (
    RowTokenizer,
    RowTokenizerState,
    parse_row,
)


class TestEmptyRows:
    """Lines that produce no cells."""

    @pytest.mark.parametrize("line", ["", "    ", "\t \t", "# comment", "   #x y z"])
    def test_blank_and_comment_lines_yield_no_cells(self, line: str) -> None:
        """Empty, all-whitespace and comment-only lines yield zero cells."""
        assert parse_row(line) == []


class TestUnquotedValues:
    """Unquoted cell handling."""

    def test_simple_values(self) -> None:
        """Whitespace separates unquoted values."""
        assert parse_row("x y z") == ["x", "y", "z"]

    def test_leading_and_trailing_whitespace(self) -> None:
        """Surrounding whitespace is skipped."""
        assert parse_row("   a\t\tb   ") == ["a", "b"]

    def test_unicode_whitespace_separates(self) -> None:
        """Non-ASCII whitespace such as NO-BREAK SPACE separates cells."""
        assert parse_row("a\u00a0b\u3000c") == ["a", "b", "c"]

    def test_comment_ends_unquoted_value(self) -> None:
        """A comment directly after a value finalizes it."""
        assert parse_row("abc#def") == ["abc"]

    def test_quote_inside_unquoted_value_is_error(self) -> None:
        """A quote inside an unquoted value fails at its offset."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('ab"c')
        assert exc_info.value.offset == 2
        assert exc_info.value.line is None


class TestNullValues:
    """Null sentinel handling."""

    def test_lone_dash_is_null(self) -> None:
        """A bare dash decodes to a null cell."""
        assert parse_row("-") == [None]
        assert parse_row("  -  ") == [None]
        assert parse_row("- -") == [None, None]

    def test_dash_prefix_is_literal(self) -> None:
        """A dash followed by a value character is a literal value."""
        assert parse_row("-x") == ["-x"]
        assert parse_row("- -1") == [None, "-1"]
        assert parse_row("--") == ["--"]

    def test_quoted_dash_is_value(self) -> None:
        """A quoted dash is a present value."""
        assert parse_row('"-" -') == ["-", None]

    def test_comment_after_null(self) -> None:
        """A comment directly after the sentinel still emits the null."""
        assert parse_row("x -#note") == ["x", None]

    def test_quote_after_dash_is_error(self) -> None:
        """A quote directly after the sentinel fails at the quote."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('a -"b"')
        assert exc_info.value.offset == 3


class TestQuotedValues:
    """Quoted cell handling and escapes."""

    def test_empty_quoted_value(self) -> None:
        """Two quotes decode to an empty, non-null cell."""
        assert parse_row('""') == [""]

    def test_whitespace_and_comment_inside_quotes(self) -> None:
        """Whitespace and '#' are literal inside quotes."""
        assert parse_row('"Hero 123" "a # b"') == ["Hero 123", "a # b"]

    def test_escaped_quote(self) -> None:
        """A doubled quote inside a quoted value is a literal quote."""
        assert parse_row('"one""two"') == ['one"two']

    def test_newline_escape(self) -> None:
        """The quote-slash-quote sequence encodes a newline."""
        assert parse_row('""/""') == ["\n"]
        assert parse_row('"a"/"b"') == ["a\nb"]

    def test_mixed_quoted_values(self) -> None:
        """Escapes and empty values combine in one row."""
        assert parse_row('"one""two" "" ""/""') == ['one"two', "", "\n"]

    def test_comment_after_closing_quote(self) -> None:
        """A comment right after a closing quote keeps the value."""
        assert parse_row('"one"#') == ["one"]
        assert parse_row('"one"#rest "with quotes') == ["one"]

    def test_character_after_closing_quote_is_error(self) -> None:
        """Only quote, slash, comment or whitespace may follow a closing quote."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('"ab"c')
        assert exc_info.value.offset == 4

    def test_character_after_newline_escape_is_error(self) -> None:
        """The slash of a newline escape must be followed by a quote."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('"a"/b"')
        assert exc_info.value.offset == 4

    def test_unterminated_quote_reports_line_length(self) -> None:
        """An unterminated quote fails at the end of the line."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('x "abc')
        assert exc_info.value.offset == 6

    def test_unterminated_newline_escape_reports_line_length(self) -> None:
        """A line ending right after a newline-escape slash is unterminated."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('"a"/')
        assert exc_info.value.offset == 4

    def test_offsets_count_characters(self) -> None:
        """Offsets are measured in characters, not encoded bytes."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('äöü"')
        assert exc_info.value.offset == 3


class TestRowTokenizer:
    """Reusable tokenizer class."""

    def test_tokenizer_is_reusable(self) -> None:
        """State resets between lines."""
        tokenizer = RowTokenizer()

        with pytest.raises(RowSyntaxError):
            tokenizer.tokenize('"open')

        assert tokenizer.tokenize("a b") == ["a", "b"]
        assert tokenizer.state == RowTokenizerState.READY

    def test_line_index_is_attached_to_errors(self) -> None:
        """A supplied line index is carried by the error."""
        with pytest.raises(RowSyntaxError) as exc_info:
            parse_row('a"', line_index=7)

        assert exc_info.value.line == 7
        assert exc_info.value.offset == 1
        assert "line 8, column 2" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("line", "expected_row"),
        [
            ("", []),
            ("-", [None]),
            ("ab", ["ab"]),
            ('"a"', ["a"]),
        ],
    )
    def test_finalization_emits_pending_cell(
        self, line: str, expected_row: list
    ) -> None:
        """Each non-error pending state emits its pending cell at end of line."""
        tokenizer = RowTokenizer()

        assert tokenizer.tokenize(line) == expected_row
        assert tokenizer.state == RowTokenizerState.READY
