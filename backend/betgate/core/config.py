"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="BETGATE_",
        extra="ignore",
    )

    app_name: str = "Betgate"
    secret_key: str = "change-me"

    # Session cookie (signed, never expires)
    session_cookie_name: str = "betgate_session"
    session_cookie_secure: bool = False

    # CORS; a comma-separated string is accepted from the environment
    allowed_origins: Annotated[List[str], NoDecode] = []

    # Bootstrap admin, created at startup when both are set
    admin_username: str | None = None
    admin_password: str | None = None

    # Serving
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
