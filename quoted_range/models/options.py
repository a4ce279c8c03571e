"""Per-call range computation options."""

from pydantic import BaseModel, Field


class RangeOptions(BaseModel):
    """Options accepted by ``compute_range``."""

    include_comments: bool = Field(False, description="Widen the range over leading comments")
    max_depth: int = Field(200, ge=1, description="Maximum node nesting before giving up")

    @classmethod
    def from_settings(cls, settings=None) -> "RangeOptions":
        """
        Build options from application settings.

        Args:
            settings: Settings instance (the module-level one when omitted)

        Returns:
            RangeOptions seeded with the configured defaults
        """
        if settings is None:
            from quoted_range.config import settings as app_settings
            settings = app_settings

        return cls(
            include_comments=settings.include_comments,
            max_depth=settings.max_depth,
        )
