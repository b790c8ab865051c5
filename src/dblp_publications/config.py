"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from dblp_publications.constants import DBLP_FEED_URL, DEFAULT_PAGE_TITLE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Feed
    feed_url: str = DBLP_FEED_URL

    # Page
    page_title: str = DEFAULT_PAGE_TITLE

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
