"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL has no default: a missing value fails validation at startup
    - PORT is mandatory when ENVIRONMENT=production; other environments fall back to 8000
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Public API with no auth: CORS defaults to every origin
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_PORT = 8000


def asyncpg_url(url: str) -> str:
    """Hosting providers hand out postgres:// URLs; asyncpg needs postgresql+asyncpg://."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int | None = None

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return asyncpg_url(v) if isinstance(v, str) else v

    database_pool_size: int = 10
    database_max_overflow: int = 5
    create_schema_on_startup: bool = True

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def require_port_in_production(self) -> "Settings":
        if self.is_production and self.port is None:
            raise ValueError("PORT must be set when ENVIRONMENT=production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def listen_port(self) -> int:
        return self.port if self.port is not None else DEVELOPMENT_PORT


@lru_cache
def get_settings() -> Settings:
    return Settings()
