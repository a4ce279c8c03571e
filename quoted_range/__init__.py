"""
Exact source ranges for Elixir quoted-form syntax trees.

Example:
    from quoted_range import Metadata, NumberLiteral, compute_range

    node = NumberLiteral(value=42, meta=Metadata(line=1, column=1, token="42"))
    compute_range(node)  # Range(start=(1, 1), end=(1, 3))
"""

from quoted_range.analyzers import (
    OperatorKind,
    RangeAnalyzer,
    add_comments_to_range,
    classify,
    compute_range,
    compute_ranges,
    is_binary_op,
    is_unary_op,
)
from quoted_range.config import Settings, settings
from quoted_range.errors import MalformedNode, MissingMetadata, NestingTooDeep, RangeError
from quoted_range.models import (
    AccessCall,
    Alias,
    AtomLiteral,
    Bitstring,
    Block,
    Call,
    Comment,
    Dot,
    InterpolatedAtom,
    InterpolatedExpr,
    Interpolation,
    KeywordPair,
    Metadata,
    Node,
    NumberLiteral,
    Position,
    QualifiedTuple,
    Range,
    RangeOptions,
    RemoteCall,
    Sigil,
    StringLiteral,
    Variable,
)
from quoted_range.utils.logging import get_logger, setup_logging

__all__ = [
    # Entry points
    "compute_range",
    "compute_ranges",
    "RangeAnalyzer",
    "RangeOptions",
    "add_comments_to_range",
    # Operators
    "OperatorKind",
    "classify",
    "is_unary_op",
    "is_binary_op",
    # Models
    "Position",
    "Range",
    "Comment",
    "Metadata",
    "Node",
    "NumberLiteral",
    "AtomLiteral",
    "StringLiteral",
    "Variable",
    "Alias",
    "Block",
    "KeywordPair",
    "Call",
    "Dot",
    "RemoteCall",
    "AccessCall",
    "QualifiedTuple",
    "InterpolatedExpr",
    "Interpolation",
    "InterpolatedAtom",
    "Bitstring",
    "Sigil",
    # Errors
    "RangeError",
    "MalformedNode",
    "MissingMetadata",
    "NestingTooDeep",
    # Configuration and logging
    "Settings",
    "settings",
    "get_logger",
    "setup_logging",
]
