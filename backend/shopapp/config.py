"""
Configuration settings for the Shop Server.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:4200", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/shops.db", description="SQLite database URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )

    # Listing Configuration
    DEFAULT_PAGE_SIZE: int = Field(
        default=20, description="Page size used when the client sends none"
    )
    MAX_PAGE_SIZE: int = Field(default=100, description="Largest accepted page size")

    # Search Configuration
    SEARCH_RATE_LIMIT: str = Field(
        default="60/minute", description="Rate limit for the full-text search endpoint"
    )
    REINDEX_ON_STARTUP: bool = Field(
        default=True, description="Rebuild the shop search index when the app starts"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
