"""Unit tests for the operator classifier."""

import pytest

from quoted_range import OperatorKind, classify, is_binary_op, is_unary_op


class TestOperatorTables:
    """Tests for the static operator tables."""

    @pytest.mark.parametrize("op", ["!", "@", "^", "&", "not", "~~~"])
    def test_unary_only(self, op):
        """Test prefix-only operators."""
        assert is_unary_op(op)
        assert not is_binary_op(op)

    @pytest.mark.parametrize("op", ["+", "-"])
    def test_unary_and_binary(self, op):
        """Test operators that are both prefix and infix."""
        assert is_unary_op(op)
        assert is_binary_op(op)

    @pytest.mark.parametrize("op", ["|>", "=", "==", "<>", "++", "and", "when", "::", "in", "\\\\", "."])
    def test_binary_only(self, op):
        """Test infix-only operators."""
        assert is_binary_op(op)
        assert not is_unary_op(op)

    @pytest.mark.parametrize("op", ["foo", "->", "..//", "<<>>", "sigil_r"])
    def test_not_operators(self, op):
        """Test names that are not unary or binary operators."""
        assert not is_unary_op(op)
        assert not is_binary_op(op)


class TestClassify:
    """Tests for classify."""

    def test_minus_by_arity(self):
        """Test arity decides between unary and binary minus."""
        assert classify("-", 1) == OperatorKind.UNARY
        assert classify("-", 2) == OperatorKind.BINARY

    def test_wrong_arity_is_neither(self):
        """Test operators applied to the wrong number of arguments."""
        assert classify("not", 2) == OperatorKind.NEITHER
        assert classify("|>", 1) == OperatorKind.NEITHER
        assert classify("+", 3) == OperatorKind.NEITHER

    def test_plain_call_is_neither(self):
        """Test ordinary call names."""
        assert classify("foo", 1) == OperatorKind.NEITHER


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
