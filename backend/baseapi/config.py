"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All endpoints and credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - cache_ttl_seconds is the fixed TTL for every cached status entry

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with docker-compose
    - Empty tax_id_service_url disables the remote call (local formula only)
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Application
    app_name: str = "base-api"
    app_version: str = "1.0.0"

    # Database
    database_url: str = (
        "postgresql+asyncpg://baseapi:baseapi@db:5432/baseapi"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs use postgresql://; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_all: bool = False

    # Cache
    cache_backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://redis:6379/0"
    cache_ttl_seconds: int = Field(600, gt=0)
    cache_key_prefix: str = "example-status:"
    redis_socket_timeout_seconds: float = 2.0

    # Tax-ID service
    tax_id_service_url: str = "http://wiremock:8080"
    tax_id_timeout_seconds: float = Field(5.0, gt=0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
