"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    """Persistent storage configuration."""

    model_config = {"env_prefix": "VILLAGE_DB_"}

    database_url: str = "sqlite+aiosqlite:///./village.db"
    echo: bool = False
    pool_size: int = 5
    create_schema: bool = True


class APIConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "VILLAGE_API_"}

    host: str = "0.0.0.0"
    port: int = 2022
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "VILLAGE_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    api: APIConfig = Field(default_factory=APIConfig)
