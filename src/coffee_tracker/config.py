"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORE_BACKENDS = frozenset({"memory", "supabase"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    store_backend: str = "memory"
    supabase_url: str | None = None
    supabase_key: str | None = None
    default_passcode: str = "coffee123"
    daily_caffeine_limit_mg: int = 400
    timezone: str = "UTC"
    catalog_ttl_seconds: int = 3600
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
