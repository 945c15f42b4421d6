"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    api_debug: bool = False
    service_name: str = "portfolio-backend"

    # Wildcard by default: public portfolio, contact form is the only write
    cors_origins: list[str] = ["*"]

    # Contact form
    contact_delay_ms: int = 1000

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def contact_delay_seconds(self) -> float:
        return self.contact_delay_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
