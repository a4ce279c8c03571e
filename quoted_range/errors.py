"""
Exceptions raised by the range engine.

Every exception here reports a broken contract between the tree producer and
the engine. None of them is retried or recovered from.
"""


class RangeError(Exception):
    """Base exception for range computation errors."""
    pass


class MalformedNode(RangeError):
    """Input does not match any recognized node shape."""

    def __init__(self, message: str, node_kind: str = "unknown"):
        super().__init__(message)
        self.node_kind = node_kind


class MissingMetadata(RangeError):
    """A metadata field required by the matched rule is absent."""

    def __init__(self, node_kind: str, field: str):
        super().__init__(f"{node_kind} node is missing required metadata field '{field}'")
        self.node_kind = node_kind
        self.field = field


class NestingTooDeep(RangeError):
    """Tree nesting exceeded the configured depth limit."""

    def __init__(self, max_depth: int, node_kind: str = "unknown"):
        super().__init__(f"Node nesting exceeds max_depth={max_depth} at {node_kind} node")
        self.max_depth = max_depth
        self.node_kind = node_kind
