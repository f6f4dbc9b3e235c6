"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Outbound fetches (None disables the httpx timeout; callers own staleness)
    http_timeout_seconds: float | None = None
    user_agent: str = "web-context/0.1"

    # YouTube
    youtube_transcript_languages: list[str] = ["en"]

    # Uploads
    document_file_size_limit: int = 10 * 1024 * 1024  # 10MB

    # App
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
