"""
Application configuration.

Loads settings from environment variables and .env file.
The Settings object is immutable once built and is passed explicitly
to the components that need it.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which the product routes are mounted.
        docs_enabled: Serve Swagger UI at /docs and the schema at /openapi.json.
        frontend_url: The only origin allowed to call the API (FRONTEND_URL).
        rate_limit_enabled: Toggle the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.

    The record store is addressed either through an explicit
    ``database_url`` (any SQLAlchemy async URL) or through the
    postgres_* parts.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", frozen=True
    )

    project_name: str = "Product Catalog API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    docs_enabled: bool = True

    frontend_url: str = "http://localhost:5173"

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    # Record store settings
    database_url: Optional[str] = None
    database_echo: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "catalog"

    def get_database_url(self) -> str:
        """Return the effective async DSN for the record store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Built from postgres_* values (asyncpg driver)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
