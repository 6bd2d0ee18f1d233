"""
Gallery configuration settings.

Pagination bounds and database retry policy for gallery queries.

Dependencies: pydantic, pydantic_settings
System role: Gallery query configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class GallerySettings(BaseSettings):
    """Gallery pagination and resilience configuration."""

    default_page_size: int = Field(default=10, description="Page size when none is requested")
    max_page_size: int = Field(default=100, description="Upper bound for requested page size")
    db_retry_attempts: int = Field(default=3, description="Attempts for transient database failures")
    db_retry_base_delay: float = Field(default=1.0, description="First retry delay in seconds")

    class Config:
        """Pydantic config."""

        env_prefix = "GALLERY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
