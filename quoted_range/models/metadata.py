"""Node metadata model."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from quoted_range.errors import MissingMetadata
from quoted_range.models.comment import Comment
from quoted_range.models.position import Position


class Metadata(BaseModel):
    """
    Positional facts a parser attaches to a node.

    Every field is independently optional. Range rules call ``require`` for
    the fields they depend on so an incomplete tree fails loudly instead of
    producing a plausible but wrong range.
    """

    model_config = ConfigDict(frozen=True)

    line: Optional[int] = Field(None, description="Line of the node's own token")
    column: Optional[int] = Field(None, description="Column of the node's own token")
    closing: Optional[Position] = Field(None, description="Position of a closing ), ], } or >>")
    end: Optional[Position] = Field(None, description="Position of a closing 'end' keyword")
    delimiter: Optional[str] = Field(None, description="Delimiter text of a string, atom or sigil")
    last: Optional[Position] = Field(None, description="Start of the final alias segment")
    no_parens: bool = Field(False, description="Call written without parentheses")
    token: Optional[str] = Field(None, description="Rendered token text of a numeric literal")
    leading_comments: Tuple[Comment, ...] = ()

    def require(self, field: str, node_kind: str) -> Any:
        """
        Return a metadata field, failing if it is absent.

        Args:
            field: Name of the metadata field
            node_kind: Kind of the node the metadata belongs to (for the error)

        Returns:
            The field value

        Raises:
            MissingMetadata: If the field is not set
        """
        value = getattr(self, field)
        if value is None:
            raise MissingMetadata(node_kind, field)
        return value

    def position(self, node_kind: str) -> Position:
        """Return the node's own start position."""
        return Position(
            line=self.require("line", node_kind),
            column=self.require("column", node_kind),
        )

    @property
    def has_closing(self) -> bool:
        """True when the node ends in a recorded closing token or 'end' keyword."""
        return self.closing is not None or self.end is not None
