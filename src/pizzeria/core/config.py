# src/pizzeria/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Pizza Store API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Stores: Reihenfolge und Auswahl der aktiven Regionen (JSON-Liste als Env-Var)
    # Format: '["ny", "chicago"]'
    enabled_stores: list[str] = Field(default=["ny", "chicago"])

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Rate Limiting (pro Client-IP, gilt für POST /stores/...)
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
