"""Unit tests for position, range and metadata models."""

import pytest
from pydantic import ValidationError

from quoted_range import Call, Comment, Metadata, MissingMetadata, Position, Range, Variable


def _range(start, end):
    return Range(start=Position(line=start[0], column=start[1]), end=Position(line=end[0], column=end[1]))


class TestPosition:
    """Tests for Position."""

    def test_ordering_is_lexicographic(self):
        """Test line is compared before column."""
        assert Position(line=1, column=9) < Position(line=2, column=1)
        assert Position(line=2, column=1) < Position(line=2, column=2)
        assert Position(line=2, column=2) <= Position(line=2, column=2)
        assert Position(line=3, column=1) > Position(line=2, column=8)

    def test_shift(self):
        """Test shifting along a line."""
        assert Position(line=4, column=2).shift(3) == Position(line=4, column=5)

    def test_is_one_indexed(self):
        """Test zero positions are rejected."""
        with pytest.raises(ValidationError):
            Position(line=0, column=1)
        with pytest.raises(ValidationError):
            Position(line=1, column=0)

    def test_is_frozen(self):
        """Test positions are immutable."""
        position = Position(line=1, column=1)

        with pytest.raises(ValidationError):
            position.line = 2


class TestRange:
    """Tests for Range."""

    def test_slice_single_line(self):
        """Test slicing within one line."""
        assert _range((1, 5), (1, 8)).slice("foo bar baz") == "bar"

    def test_slice_multiple_lines(self):
        """Test slicing across lines."""
        source = "a = [\n  1,\n  2\n]\n"

        assert _range((1, 5), (4, 2)).slice(source) == "[\n  1,\n  2\n]"

    def test_slice_crlf(self):
        """Test slicing with Windows line endings."""
        source = "x\r\nfoo(1)\r\n"

        assert _range((2, 1), (2, 7)).slice(source) == "foo(1)"

    def test_contains(self):
        """Test range containment."""
        outer = _range((1, 1), (3, 4))

        assert outer.contains(_range((2, 1), (2, 5)))
        assert outer.contains(outer)
        assert not outer.contains(_range((3, 1), (3, 5)))


class TestMetadata:
    """Tests for Metadata."""

    def test_defaults(self):
        """Test every field is optional."""
        meta = Metadata()

        assert meta.line is None
        assert meta.closing is None
        assert meta.no_parens is False
        assert meta.leading_comments == ()
        assert not meta.has_closing

    def test_require_present_field(self):
        """Test require returns present values."""
        meta = Metadata(line=1, column=1, delimiter='"')

        assert meta.require("delimiter", "string") == '"'

    def test_require_missing_field(self):
        """Test require raises for absent values."""
        with pytest.raises(MissingMetadata) as exc_info:
            Metadata(line=1).require("column", "variable")

        assert exc_info.value.field == "column"
        assert exc_info.value.node_kind == "variable"
        assert "column" in str(exc_info.value)

    def test_has_closing(self):
        """Test either closing token marks a node as closing-aware."""
        assert Metadata(closing=Position(line=1, column=5)).has_closing
        assert Metadata(end=Position(line=3, column=1)).has_closing


class TestNodes:
    """Tests for node models."""

    def test_kind(self):
        """Test each variant reports its kind."""
        assert Variable(name="x").kind == "variable"
        assert Call(name="foo").kind == "call"

    def test_children_keep_their_variant(self):
        """Test child nodes are stored as given."""
        child = Variable(name="x", meta=Metadata(line=1, column=5))
        call = Call(name="foo", args=[child, [child]])

        assert call.args[0] is child
        assert isinstance(call.args[1], tuple)
        assert call.args[1][0] is child

    def test_nodes_are_hashable(self):
        """Test equal nodes hash alike and can be used as dict keys."""
        meta = Metadata(line=1, column=1, leading_comments=[Comment(line=1, text="# x")])
        variable = Variable(name="x", meta=meta)
        call = Call(name="foo", args=[variable, [variable]], meta=Metadata(line=1, column=1))

        assert hash(variable) == hash(Variable(name="x", meta=meta))
        assert {call: "foo"}[Call(name="foo", args=(variable, (variable,)), meta=Metadata(line=1, column=1))] == "foo"

    def test_sequence_fields_are_immutable(self):
        """Test sequence fields cannot be changed in place."""
        call = Call(name="foo", args=[Variable(name="x")])
        meta = Metadata(leading_comments=[Comment(line=1, text="# x")])

        with pytest.raises(AttributeError):
            call.args.append(Variable(name="y"))
        with pytest.raises(AttributeError):
            meta.leading_comments.append(Comment(line=2, text="# y"))
        with pytest.raises(ValidationError):
            call.args = ()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
