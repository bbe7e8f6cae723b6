"""
Configuration and settings for the todo service.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_SCRIPT = Path(__file__).resolve().parent / "resources" / "data.sql"


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_prefix: str = Field(default="/api")

    # Database (in-memory SQLite unless overridden)
    database_url: str = Field(default="sqlite+pysqlite:///:memory:")
    sql_echo: bool = Field(default=False)

    # Startup seed data
    seed_on_startup: bool = Field(default=True)
    seed_script_path: Path = Field(default=DEFAULT_SEED_SCRIPT)

    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
