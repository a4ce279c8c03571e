"""
Library configuration management.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Range computation
    include_comments: bool = False
    max_depth: int = 200

    # Batch computation
    max_workers: int = 3

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "QUOTED_RANGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
