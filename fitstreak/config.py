"""Configuration management for FitStreak."""

from pydantic_settings import BaseSettings
from typing import Literal
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase (optional, local JSON storage is used when unset)
    supabase_url: str = ""
    supabase_key: str = ""

    # Storage
    storage_backend: Literal["auto", "local", "supabase"] = "auto"
    data_dir: str = "data"
    local_user_id: str = "local_user"

    # Calendar used for day keys and "today"
    timezone: str = "UTC"

    # Streaks
    consistency_window_days: int = 30

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "FITSTREAK_"

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
