"""Unit tests for interpolated literal end positions."""

import pytest

from quoted_range.analyzers.interpolation import (
    has_interpolations,
    interpolation_end,
    is_multiline_delimiter,
    sigil_end,
)
from quoted_range import InterpolatedExpr, Interpolation, Metadata, Position, Sigil, Variable


def _expr(closing_line, closing_column):
    return InterpolatedExpr(
        expr=Variable(name="x", meta=Metadata(line=closing_line, column=closing_column - 1)),
        meta=Metadata(closing=Position(line=closing_line, column=closing_column)),
    )


START = Position(line=1, column=1)


class TestInterpolationEnd:
    """Tests for interpolation_end."""

    def test_plain_text(self):
        """Test text only adds both quotes."""
        assert interpolation_end(["hello"], '"', START) == Position(line=1, column=8)

    def test_empty_segments(self):
        """Test empty literal is just its quotes."""
        assert interpolation_end([], '"', START) == Position(line=1, column=3)

    def test_trailing_expression(self):
        """Test closing quote follows the last brace."""
        assert interpolation_end(["a", _expr(1, 6)], '"', START) == Position(line=1, column=8)

    def test_text_after_newline_restarts_at_start_column(self):
        """Test a text segment with a newline resets the column to the start column."""
        start = Position(line=3, column=5)

        end = interpolation_end([_expr(3, 9), "ab\ncd"], '"', start)

        assert end == Position(line=4, column=5 + 2 + 1)

    def test_crlf_counts_as_one_newline(self):
        """Test Windows line endings."""
        end = interpolation_end([_expr(1, 5), "a\r\nb"], '"', START)

        assert end.line == 2

    def test_heredoc_with_expression(self):
        """Test heredoc closes at delimiter width on its last line."""
        end = interpolation_end(["a", _expr(2, 5), "\n"], '"""', START)

        assert end == Position(line=3, column=4)

    def test_heredoc_without_expression_is_plain(self):
        """Test heredoc correction needs an embedded expression."""
        end = interpolation_end(["ab"], "'''", START)

        assert end == Position(line=1, column=5)


class TestHelpers:
    """Tests for delimiter and segment helpers."""

    @pytest.mark.parametrize("delimiter,expected", [
        ('"""', True),
        ("'''", True),
        ('"', False),
        ("/", False),
        (None, False),
    ])
    def test_is_multiline_delimiter(self, delimiter, expected):
        """Test triple quotes are the only multi-line delimiters."""
        assert is_multiline_delimiter(delimiter) is expected

    def test_has_interpolations(self):
        """Test detection of embedded expressions."""
        assert has_interpolations(["a", _expr(1, 4)])
        assert not has_interpolations(["a", "b"])


class TestSigilEnd:
    """Tests for sigil_end."""

    def test_single_line_without_modifiers(self):
        """Test `~w(a b)`."""
        sigil = Sigil(
            letter="w",
            body=Interpolation(segments=["a b"], meta=Metadata(line=1, column=1)),
            meta=Metadata(line=1, column=1, delimiter="("),
        )

        assert sigil_end(sigil) == Position(line=1, column=8)

    def test_heredoc_keeps_start_indentation(self):
        """Test heredoc sigil closes at its own indentation."""
        sigil = Sigil(
            letter="S",
            body=Interpolation(segments=["one\ntwo\n"], meta=Metadata(line=4, column=3)),
            modifiers="",
            meta=Metadata(line=4, column=3, delimiter='"""'),
        )

        assert sigil_end(sigil) == Position(line=7, column=6)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
