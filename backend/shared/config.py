"""
Centralized configuration for the retail audit backend.

All settings are loaded from environment variables with sensible defaults.
The two Supabase values are required; everything else has a default.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Retail Audit API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (required)
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Notifications
    notifications_page_size: int = 50

    # Storage
    photos_bucket: str = "audit-photos"


def require_backend_settings(settings: Settings) -> Settings:
    """
    Ensure the values needed to reach the backend are present.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_ANON_KEY is empty
    """
    missing = [
        name
        for name in ("supabase_url", "supabase_anon_key")
        if not getattr(settings, name)
    ]
    if missing:
        raise ConfigurationError(missing)
    return settings


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
