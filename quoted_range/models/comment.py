"""Comment data models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """A source comment attached to a node by the parser."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line the comment starts on")
    column: Optional[int] = Field(None, description="Start column; absent means column 1")
    text: str = Field(..., description="Comment text including the leading '#'")
