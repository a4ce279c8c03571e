"""
Range Analyzer component for quoted-form syntax trees.

This module provides the RangeAnalyzer class that reconstructs the exact
source span of a node from its structure and positional metadata alone,
without looking at the source text.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from quoted_range.analyzers.comment_augmenter import add_comments_to_range
from quoted_range.analyzers.interpolation import interpolation_end, is_multiline_delimiter, sigil_end
from quoted_range.analyzers.operators import OperatorKind, classify
from quoted_range.errors import MalformedNode, NestingTooDeep, RangeError
from quoted_range.models import (
    AccessCall,
    Alias,
    AtomLiteral,
    Bitstring,
    Block,
    Call,
    InterpolatedAtom,
    InterpolatedExpr,
    Interpolation,
    KeywordPair,
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
from quoted_range.utils.logging import get_logger, log_error_with_context
from quoted_range.utils.text import split_lines

logger = get_logger(__name__)

# Widths of closing tokens.
END_KEYWORD_WIDTH = 3
CLOSER_WIDTH = 1
PARENS_WIDTH = 2

OptionsLike = Union[RangeOptions, Mapping[str, Any], None]


def _kind_of(node: Any) -> str:
    if isinstance(node, Node):
        return node.kind
    if isinstance(node, (list, tuple)):
        return "sequence"
    return type(node).__name__


def _coerce_options(options: OptionsLike) -> RangeOptions:
    if isinstance(options, RangeOptions):
        return options
    defaults = RangeOptions.from_settings()
    if options is None:
        return defaults
    return RangeOptions(**{**defaults.model_dump(), **dict(options)})


class RangeAnalyzer:
    """
    Computes source ranges for quoted-form nodes.

    Dispatches on the node's variant; each variant has its own layout rule
    for where the node starts and where it ends. Composite nodes are handled
    by recursive descent over their children. The analyzer keeps no state
    between calls and may be shared across threads.
    """

    def __init__(self, options: OptionsLike = None):
        """
        Initialize Range Analyzer.

        Args:
            options: RangeOptions, a mapping of option fields, or None for
                the configured defaults
        """
        self.options = _coerce_options(options)
        self._handlers: Dict[type, Callable[[Any, int], Range]] = {
            NumberLiteral: self._number_range,
            AtomLiteral: self._atom_range,
            StringLiteral: self._string_range,
            Variable: self._variable_range,
            Alias: self._alias_range,
            Block: self._block_range,
            KeywordPair: self._pair_range,
            Call: self._call_range,
            RemoteCall: self._remote_call_range,
            AccessCall: self._access_range,
            QualifiedTuple: self._qualified_tuple_range,
            InterpolatedExpr: self._interpolated_expr_range,
            Interpolation: self._interpolation_range,
            InterpolatedAtom: self._interpolated_atom_range,
            Bitstring: self._bitstring_range,
            Sigil: self._sigil_range,
        }

    def get_range(self, node: Any) -> Range:
        """
        Compute the range of a node.

        Args:
            node: A Node, or a bare sequence of nodes

        Returns:
            Half-open Range covering the node's source text, widened over
            its leading comments when ``include_comments`` is set

        Raises:
            MalformedNode: If the node matches no known shape
            MissingMetadata: If a required metadata field is absent
            NestingTooDeep: If the tree is nested deeper than ``max_depth``
        """
        kind = _kind_of(node)
        node_logger = logger.with_context(node_kind=kind)
        if isinstance(node, Node):
            node_logger = node_logger.with_context(line=node.meta.line, column=node.meta.column)

        try:
            range_ = self._root_range(node)
        except RangeError as e:
            log_error_with_context(node_logger, "Range computation failed", e)
            raise

        if self.options.include_comments:
            range_ = add_comments_to_range(range_, node)

        node_logger.debug(f"Computed {kind} range {range_.start.as_tuple()}-{range_.end.as_tuple()}")
        return range_

    def _root_range(self, node: Any) -> Range:
        try:
            return self._range(node, 0)
        except RecursionError:
            # max_depth is above the interpreter's recursion limit
            raise NestingTooDeep(self.options.max_depth, _kind_of(node)) from None

    def _range(self, node: Any, depth: int) -> Range:
        if depth > self.options.max_depth:
            raise NestingTooDeep(self.options.max_depth, _kind_of(node))

        if isinstance(node, (list, tuple)):
            return self._sequence_range(node, depth)

        handler = self._handlers.get(type(node))
        if handler is None:
            raise MalformedNode(f"Unrecognized node shape: {node!r}", _kind_of(node))
        return handler(node, depth)

    def _closing_range(self, node: Node, start: Position) -> Range:
        """Range of a node that ends in a recorded closing token."""
        if node.meta.end is not None:
            end = node.meta.end.shift(END_KEYWORD_WIDTH)
        else:
            end = node.meta.require("closing", node.kind).shift(CLOSER_WIDTH)
        return Range(start=start, end=end)

    # Literals

    def _number_range(self, node: NumberLiteral, depth: int) -> Range:
        start = node.meta.position(node.kind)
        token = node.meta.require("token", node.kind)
        return Range(start=start, end=start.shift(len(token)))

    def _atom_range(self, node: AtomLiteral, depth: int) -> Range:
        start = node.meta.position(node.kind)
        delimiter = node.meta.delimiter

        lines = split_lines(node.value)
        end_line = start.line + len(lines) - 1
        end_column = start.column + len(lines[-1]) + len(delimiter or "")

        if end_line == start.line and delimiter is not None:
            # Colon and opening delimiter
            end_column += 2
        elif end_line == start.line:
            # Just the colon
            end_column += 1

        return Range(start=start, end=Position(line=end_line, column=end_column))

    def _string_range(self, node: StringLiteral, depth: int) -> Range:
        start = node.meta.position(node.kind)
        delimiter = node.meta.require("delimiter", node.kind)

        lines = split_lines(node.value)

        if is_multiline_delimiter(delimiter):
            end = Position(line=start.line + len(lines), column=start.column + len(delimiter))
            return Range(start=start, end=end)

        end_line = start.line + len(lines) - 1
        end_column = start.column + len(lines[-1]) + len(delimiter)
        if end_line == start.line:
            end_column += 1

        return Range(start=start, end=Position(line=end_line, column=end_column))

    def _variable_range(self, node: Variable, depth: int) -> Range:
        start = node.meta.position(node.kind)
        return Range(start=start, end=start.shift(len(node.name)))

    def _alias_range(self, node: Alias, depth: int) -> Range:
        if not node.segments:
            raise MalformedNode("Alias has no segments", node.kind)

        first, last_segment = node.segments[0], node.segments[-1]

        if isinstance(first, Node):
            # __MODULE__.Nested, @module.Nested, module().Nested
            start = self._range(first, depth + 1).start
        else:
            start = node.meta.position(node.kind)

        if isinstance(last_segment, Node):
            return Range(start=start, end=self._range(last_segment, depth + 1).end)

        last = node.meta.require("last", node.kind)
        return Range(start=start, end=last.shift(len(last_segment)))

    # Containers

    def _block_range(self, node: Block, depth: int) -> Range:
        if node.meta.has_closing:
            return self._closing_range(node, node.meta.position(node.kind))

        if not node.items:
            raise MalformedNode("Block without closing token has no items", node.kind)

        return Range(
            start=self._range(node.items[0], depth + 1).start,
            end=self._range(node.items[-1], depth + 1).end,
        )

    def _pair_range(self, node: KeywordPair, depth: int) -> Range:
        return Range(
            start=self._range(node.key, depth + 1).start,
            end=self._range(node.value, depth + 1).end,
        )

    def _sequence_range(self, nodes: Sequence[Any], depth: int) -> Range:
        # Only partial keyword lists and stab clause patterns appear bare.
        if not nodes:
            raise MalformedNode("Bare sequence is empty", "sequence")

        first_range = self._range(nodes[0], depth + 1)
        if len(nodes) == 1:
            return first_range

        return Range(start=first_range.start, end=self._range(nodes[-1], depth + 1).end)

    # Calls

    def _call_range(self, node: Call, depth: int) -> Range:
        name, args = node.name, node.args

        if name == "->" and len(args) == 2:
            # pattern -> body
            return Range(
                start=self._range(args[0], depth + 1).start,
                end=self._range(args[1], depth + 1).end,
            )

        operator_kind = classify(name, len(args))

        if operator_kind == OperatorKind.UNARY:
            return self._unary_range(node, depth)

        if operator_kind == OperatorKind.BINARY:
            return Range(
                start=self._range(args[0], depth + 1).start,
                end=self._range(args[1], depth + 1).end,
            )

        if name == "..//" and len(args) == 3:
            # first..last//step
            return Range(
                start=self._range(args[0], depth + 1).start,
                end=self._range(args[2], depth + 1).end,
            )

        return self._unqualified_call_range(node, depth)

    def _unary_range(self, node: Call, depth: int) -> Range:
        start = node.meta.position(node.kind)
        operand = self._range(node.args[0], depth + 1)

        end_column = operand.end.column
        if operand.end.line != start.line:
            end_column += len(node.name)

        return Range(start=start, end=Position(line=operand.end.line, column=end_column))

    def _unqualified_call_range(self, node: Call, depth: int) -> Range:
        start = node.meta.position(node.kind)

        if node.meta.has_closing:
            return self._closing_range(node, start)

        if not node.args:
            return Range(start=start, end=start)

        return Range(start=start, end=self._range(node.args[-1], depth + 1).end)

    def _remote_call_range(self, node: RemoteCall, depth: int) -> Range:
        start = self._range(node.dot.receiver, depth + 1).start

        if node.meta.has_closing:
            return self._closing_range(node, start)

        if node.args:
            return Range(start=start, end=self._range(node.args[-1], depth + 1).end)

        identifier = node.meta.position(node.kind)
        name_length = len(node.dot.name) if node.dot.name is not None else 0
        parens_length = 0 if node.meta.no_parens else PARENS_WIDTH

        return Range(start=start, end=identifier.shift(name_length + parens_length))

    def _access_range(self, node: AccessCall, depth: int) -> Range:
        return self._closing_range(node, self._range(node.subject, depth + 1).start)

    def _qualified_tuple_range(self, node: QualifiedTuple, depth: int) -> Range:
        return self._closing_range(node, self._range(node.receiver, depth + 1).start)

    # Interpolated literals

    def _interpolated_expr_range(self, node: InterpolatedExpr, depth: int) -> Range:
        return self._closing_range(node, node.meta.position(node.kind))

    def _interpolation_range(self, node: Interpolation, depth: int) -> Range:
        start = node.meta.position(node.kind)
        end = interpolation_end(node.segments, node.meta.delimiter or '"', start)
        return Range(start=start, end=end)

    def _interpolated_atom_range(self, node: InterpolatedAtom, depth: int) -> Range:
        start = node.body.meta.position(node.body.kind)
        end = interpolation_end(node.body.segments, node.meta.delimiter or '"', start)
        return Range(start=start, end=end)

    def _bitstring_range(self, node: Bitstring, depth: int) -> Range:
        range_ = self._closing_range(node, node.meta.position(node.kind))
        # The closing token is >>, one wider than ), ] or }
        return Range(start=range_.start, end=range_.end.shift(1))

    def _sigil_range(self, node: Sigil, depth: int) -> Range:
        return Range(start=node.meta.position(node.kind), end=sigil_end(node))


def compute_range(node: Any, options: OptionsLike = None) -> Range:
    """
    Compute the source range of a node.

    Args:
        node: A Node, or a bare sequence of nodes
        options: RangeOptions or a mapping such as ``{"include_comments": True}``

    Returns:
        Half-open Range covering the node's source text
    """
    return RangeAnalyzer(options).get_range(node)


def compute_ranges(
    nodes: Sequence[Any],
    options: OptionsLike = None,
    max_workers: Optional[int] = None,
) -> List[Range]:
    """
    Compute ranges for independent top-level nodes in parallel.

    Args:
        nodes: Nodes to compute ranges for
        options: Options applied to every node
        max_workers: Worker thread count (configured ``max_workers`` when omitted)

    Returns:
        Ranges in the same order as ``nodes``

    Raises:
        RangeError: The first defect encountered, in input order
    """
    if max_workers is None:
        from quoted_range.config import settings
        max_workers = settings.max_workers

    analyzer = RangeAnalyzer(options)

    logger.debug(f"Computing ranges for {len(nodes)} nodes with {max_workers} workers")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(analyzer.get_range, nodes))
