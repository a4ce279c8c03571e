"""Data models for quoted-form range computation."""

from .comment import Comment
from .metadata import Metadata
from .node import (
    AccessCall,
    Alias,
    AtomLiteral,
    Bitstring,
    Block,
    Call,
    Child,
    Dot,
    InterpolatedAtom,
    InterpolatedExpr,
    Interpolation,
    KeywordPair,
    Node,
    NumberLiteral,
    QualifiedTuple,
    RemoteCall,
    Sigil,
    StringLiteral,
    Variable,
)
from .options import RangeOptions
from .position import Position, Range

__all__ = [
    # Position models
    "Position",
    "Range",
    # Metadata models
    "Comment",
    "Metadata",
    # Node models
    "Node",
    "Child",
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
    # Options
    "RangeOptions",
]
