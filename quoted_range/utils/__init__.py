"""
Utility modules for quoted-form range computation.
"""

from quoted_range.utils.logging import (
    get_logger,
    setup_logging,
    log_error_with_context,
)
from quoted_range.utils.text import line_offsets, split_lines

__all__ = [
    "get_logger",
    "setup_logging",
    "log_error_with_context",
    "line_offsets",
    "split_lines",
]
