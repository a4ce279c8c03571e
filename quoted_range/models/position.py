"""Position and range data models."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from quoted_range.utils.text import line_offsets


class Position(BaseModel):
    """
    A point in source text.

    Both fields are 1-indexed. ``column`` counts characters (code points),
    not bytes, so a multi-byte character advances it by one.
    """

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line number (1-indexed)")
    column: int = Field(..., ge=1, description="Column in characters (1-indexed)")

    def as_tuple(self) -> Tuple[int, int]:
        return (self.line, self.column)

    def shift(self, columns: int) -> "Position":
        """Return a position ``columns`` characters further along the same line."""
        return Position(line=self.line, column=self.column + columns)

    def __lt__(self, other: "Position") -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "Position") -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "Position") -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "Position") -> bool:
        return self.as_tuple() >= other.as_tuple()


class Range(BaseModel):
    """Half-open ``[start, end)`` span of source text."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    def contains(self, other: "Range") -> bool:
        """Check whether ``other`` lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end

    def slice(self, text: str) -> str:
        """
        Extract the text covered by this range.

        Args:
            text: The complete source the range was computed against

        Returns:
            The substring between ``start`` (inclusive) and ``end`` (exclusive)
        """
        offsets = line_offsets(text)
        begin = offsets[self.start.line - 1] + self.start.column - 1
        finish = offsets[self.end.line - 1] + self.end.column - 1
        return text[begin:finish]
