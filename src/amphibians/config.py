"""
Application settings.

Values come from the environment (prefix ``AMPHIBIANS_``) or a local ``.env``
file, e.g. ``AMPHIBIANS_BASE_URL=http://localhost:8000/``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="AMPHIBIANS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "Amphibians"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    base_url: str = Field(
        default="https://android-kotlin-fun-mars-server.appspot.com/",
        min_length=8,
        description="Server root; the amphibians path is appended to it.",
    )
    http_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout (seconds).")

    api_port: int = Field(default=8000, ge=1, le=65535)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
