"""
Syntax tree node models.

A closed set of node variants covering the shapes of an Elixir quoted form.
Every variant carries a ``Metadata`` record; children are other nodes or,
where the grammar allows it, bare sequences of nodes (partial keyword lists and
stab clause patterns).
"""

from typing import ClassVar, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from quoted_range.models.metadata import Metadata


class Node(BaseModel):
    """Base class for all syntax tree nodes."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "node"

    meta: Metadata = Field(default_factory=Metadata)


Child = Union[Node, Tuple[Node, ...]]


class NumberLiteral(Node):
    """Integer or float literal; ``meta.token`` holds its source text."""

    kind: ClassVar[str] = "number"

    value: Union[int, float]


class AtomLiteral(Node):
    """Atom literal such as ``:ok`` or ``:"with spaces"``."""

    kind: ClassVar[str] = "atom"

    value: str = Field(..., description="Atom name without the leading colon")


class StringLiteral(Node):
    """String or charlist literal without interpolation."""

    kind: ClassVar[str] = "string"

    value: str


class Variable(Node):
    """Variable reference."""

    kind: ClassVar[str] = "variable"

    name: str


class Alias(Node):
    """Dotted module alias such as ``Foo.Bar`` or ``__MODULE__.Nested``."""

    kind: ClassVar[str] = "alias"

    segments: Tuple[Union[str, Node], ...] = ()


class Block(Node):
    """Grouping container: parenthesised expressions, lists, tuples, do/end bodies."""

    kind: ClassVar[str] = "block"

    items: Tuple[Child, ...] = ()


class KeywordPair(Node):
    """``key: value`` entry of a keyword list."""

    kind: ClassVar[str] = "pair"

    key: Node
    value: Node


class Call(Node):
    """Unqualified call, including operator applications and stab clauses."""

    kind: ClassVar[str] = "call"

    name: str
    args: Tuple[Child, ...] = ()


class Dot(Node):
    """Callee of a qualified call; ``name`` is None for ``fun.()``."""

    kind: ClassVar[str] = "dot"

    receiver: Node
    name: Optional[str] = None


class RemoteCall(Node):
    """Qualified call such as ``Foo.bar(1)`` or anonymous call ``fun.(1)``."""

    kind: ClassVar[str] = "remote_call"

    dot: Dot
    args: Tuple[Child, ...] = ()


class AccessCall(Node):
    """Indexing syntax ``subject[key]``."""

    kind: ClassVar[str] = "access"

    subject: Node
    key: Node


class QualifiedTuple(Node):
    """Multi-alias syntax ``Foo.{Bar, Baz}``."""

    kind: ClassVar[str] = "qualified_tuple"

    receiver: Node
    items: Tuple[Node, ...] = ()


class InterpolatedExpr(Node):
    """One ``#{...}`` segment; ``meta.closing`` is the position of its ``}``."""

    kind: ClassVar[str] = "interpolated_expr"

    expr: Node


class Interpolation(Node):
    """String, charlist or sigil body made of text and embedded expressions."""

    kind: ClassVar[str] = "interpolation"

    segments: Tuple[Union[str, InterpolatedExpr], ...] = ()


class InterpolatedAtom(Node):
    """Quoted atom with interpolation, ``:"foo#{bar}"``."""

    kind: ClassVar[str] = "interpolated_atom"

    body: Interpolation


class Bitstring(Node):
    """Bitstring construction ``<<a, b>>``."""

    kind: ClassVar[str] = "bitstring"

    items: Tuple[Node, ...] = ()


class Sigil(Node):
    """Sigil such as ``~r/foo/i``."""

    kind: ClassVar[str] = "sigil"

    letter: str = Field(..., description="Sigil name without the '~'")
    body: Interpolation
    modifiers: str = ""
