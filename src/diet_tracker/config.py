"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_MEMORY = "memory"
STORAGE_SUPABASE = "supabase"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = STORAGE_MEMORY
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the storage backend name, defaulting to in-memory storage."""
    if raw is None:
        return STORAGE_MEMORY
    cleaned = raw.strip().lower()
    if cleaned == STORAGE_SUPABASE:
        return STORAGE_SUPABASE
    return STORAGE_MEMORY
