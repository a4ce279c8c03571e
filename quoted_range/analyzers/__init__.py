"""Range analysis components."""

from quoted_range.analyzers.comment_augmenter import add_comments_to_range
from quoted_range.analyzers.operators import OperatorKind, classify, is_binary_op, is_unary_op
from quoted_range.analyzers.range_analyzer import RangeAnalyzer, compute_range, compute_ranges

__all__ = [
    "RangeAnalyzer",
    "compute_range",
    "compute_ranges",
    "add_comments_to_range",
    "OperatorKind",
    "classify",
    "is_unary_op",
    "is_binary_op",
]
