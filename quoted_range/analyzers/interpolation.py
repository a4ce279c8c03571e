"""
End-position arithmetic for interpolated literals and sigils.

Interpolated strings, charlists, quoted atoms and sigil bodies are stored as
a sequence of text segments and ``#{...}`` segments. Their end position is
rebuilt by walking the segments left to right: text advances by its newline
count and trailing line length, while an embedded expression jumps straight
to the column after its closing brace.
"""

from typing import Optional, Sequence, Union

from quoted_range.models import InterpolatedExpr, Position, Sigil
from quoted_range.utils.text import split_lines

MULTILINE_DELIMITERS = ('"""', "'''")

# Width of the multi-line sigil closing delimiter.
HEREDOC_CLOSER_WIDTH = 3

# Width of the "~x" prefix of a single-line sigil.
SIGIL_PREFIX_WIDTH = 2

Segment = Union[str, InterpolatedExpr]


def is_multiline_delimiter(delimiter: Optional[str]) -> bool:
    return delimiter in MULTILINE_DELIMITERS


def has_interpolations(segments: Sequence[Segment]) -> bool:
    return any(isinstance(segment, InterpolatedExpr) for segment in segments)


def interpolation_end(segments: Sequence[Segment], delimiter: str, start: Position) -> Position:
    """
    Compute the end position of an interpolated literal.

    Args:
        segments: Text and embedded-expression segments, in source order
        delimiter: Delimiter the literal was written with
        start: Position of the literal's opening token

    Returns:
        Position one column past the closing delimiter

    Raises:
        MissingMetadata: If an embedded expression has no closing position
    """
    line, column = start.line, start.column

    for segment in segments:
        if isinstance(segment, InterpolatedExpr):
            closing = segment.meta.require("closing", segment.kind)
            # Step over the closing }
            line, column = closing.line, closing.column + 1
            continue

        lines = split_lines(segment)
        length = len(lines[-1])
        line_count = len(lines) - 1

        if line_count > 0:
            column = start.column + length
        else:
            column = column + length
        line += line_count

    if is_multiline_delimiter(delimiter) and has_interpolations(segments):
        return Position(line=line, column=len(delimiter) + 1)

    if has_interpolations(segments):
        return Position(line=line, column=column + 1)

    return Position(line=line, column=column + 2)


def sigil_end(sigil: Sigil) -> Position:
    """
    Compute the end position of a sigil, modifiers included.

    Args:
        sigil: Sigil node

    Returns:
        Position one column past the last modifier letter
    """
    start = sigil.meta.position(sigil.kind)
    delimiter = sigil.meta.require("delimiter", sigil.kind)
    segments = sigil.body.segments

    end = interpolation_end(segments, delimiter, start).shift(len(sigil.modifiers))

    if is_multiline_delimiter(delimiter) and not has_interpolations(segments):
        # Without interpolations the single text segment carries no leading
        # newline, so the walk ends one line short. The closing delimiter sits
        # at the sigil's own indentation.
        return Position(line=end.line + 1, column=start.column + HEREDOC_CLOSER_WIDTH)

    if is_multiline_delimiter(delimiter) or has_interpolations(segments):
        return end

    return end.shift(SIGIL_PREFIX_WIDTH)
