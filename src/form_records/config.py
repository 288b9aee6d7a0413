"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    record_store: Literal["supabase", "memory"] = "supabase"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    records_table: str = "test_form_data"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class ConfigurationError(RuntimeError):
    """Raised when settings are missing values a component needs."""


def require_supabase_credentials(settings: Settings) -> tuple[str, str]:
    """Return the Supabase URL and key, failing when either is unset."""
    missing = [
        name
        for name in ("supabase_url", "supabase_service_key")
        if not getattr(settings, name)
    ]
    if missing:
        raise ConfigurationError(
            "Supabase record store requires " + ", ".join(m.upper() for m in missing)
        )
    return settings.supabase_url, settings.supabase_service_key
