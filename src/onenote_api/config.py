"""Client configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # OneNote API
    onenote_api_root: str = "https://www.onenote.com/api"
    onenote_api_version: str = "v1.0"
    onenote_beta_version: str = "beta"
    onenote_timeout_ms: int = 30_000
    onenote_auth_header: str = ""  # Full header value, e.g. "Bearer <token>"

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings. Lazy initialization to avoid import-time errors."""
    return Settings()
