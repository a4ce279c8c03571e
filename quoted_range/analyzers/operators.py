"""
Static classification of Elixir operators.

The range engine consults these tables to decide whether a call node is an
operator application, and if so which side of the operator the range starts
from.
"""

from enum import Enum
from typing import FrozenSet


class OperatorKind(str, Enum):
    """How an operator call lays out around its operands."""

    UNARY = "unary"
    BINARY = "binary"
    NEITHER = "neither"


UNARY_OPERATORS: FrozenSet[str] = frozenset({
    "!", "@", "^", "&", "not", "+", "-", "~~~",
})

BINARY_OPERATORS: FrozenSet[str] = frozenset({
    # Arithmetic and list
    "+", "-", "*", "/", "**", "++", "--", "+++", "---", "..", "<>",
    # Comparison
    "==", "!=", "===", "!==", "<", ">", "<=", ">=", "=~",
    # Boolean
    "&&", "||", "and", "or", "in", "not in",
    # Bitwise
    "&&&", "|||", "^^^", "<<<", ">>>",
    # Arrows and pipes
    "|>", "<<~", "~>>", "<~", "~>", "<~>", "<|>", "<-",
    # Matching and specs
    "=", "|", "::", "when", "\\\\",
    # Remote access
    ".",
})


def is_unary_op(op: str) -> bool:
    """Check whether ``op`` can be written as a prefix operator."""
    return op in UNARY_OPERATORS


def is_binary_op(op: str) -> bool:
    """Check whether ``op`` can be written as an infix operator."""
    return op in BINARY_OPERATORS


def classify(op: str, arity: int) -> OperatorKind:
    """
    Classify an operator call by name and argument count.

    ``+`` and ``-`` are both unary and binary; arity settles which one a
    given call is.

    Args:
        op: Call name
        arity: Number of arguments the call was applied to

    Returns:
        OperatorKind for the call
    """
    if arity == 1 and is_unary_op(op):
        return OperatorKind.UNARY
    if arity == 2 and is_binary_op(op):
        return OperatorKind.BINARY
    return OperatorKind.NEITHER
