"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the adoption tracker."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None

    # Fixed cooldown after a rate-limit response, in seconds
    rate_limit_cooldown: float = 10.0
    # None retries rate limits until they clear
    max_rate_limit_retries: int | None = None
    # GitHub caps REST pages at 100 items
    per_page: int = Field(100, ge=1, le=100)
    requests_per_second: float = 1.3


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
