"""
Comment augmentation for computed ranges.

Widens a node's range so it also covers the comments the parser attached in
front of the node.
"""

from typing import Any

from quoted_range.models import Node, Position, Range


def add_comments_to_range(range_: Range, node: Any) -> Range:
    """
    Widen a range over the node's leading comments.

    The start moves to the first comment. The end only moves when the last
    comment shares the node's start line, in which case it is extended to
    the end of that comment. Applying this twice gives the same result as
    applying it once.

    Args:
        range_: Range computed for ``node``
        node: The node the range belongs to; bare sequences and other values
            without metadata carry no comments

    Returns:
        The widened range, or ``range_`` unchanged when there are no comments
    """
    comments = node.meta.leading_comments if isinstance(node, Node) else ()
    if not comments:
        return range_

    first_comment = comments[0]
    last_comment = comments[-1]

    start = Position(
        line=first_comment.line,
        column=min(range_.start.column, first_comment.column or 1),
    )

    # The node's own line, not range_.start, so a widened range stays put.
    node_line = node.meta.line if node.meta.line is not None else range_.start.line

    end_column = range_.end.column
    if last_comment.line == node_line:
        comment_end = (last_comment.column or 1) + len(last_comment.text)
        end_column = max(end_column, comment_end)

    return Range(start=start, end=Position(line=range_.end.line, column=end_column))
