"""Settings: required DATABASE_URL, production PORT rule, URL rewriting."""

import pytest
from pydantic import ValidationError

from examguide.config import DEVELOPMENT_PORT, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("DATABASE_URL", "PORT", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)


def test_database_url_is_required():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_production_requires_port():
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            database_url="sqlite+aiosqlite:///:memory:",
            environment="production",
        )


def test_development_falls_back_to_default_port():
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    assert settings.port is None
    assert settings.listen_port == DEVELOPMENT_PORT


def test_port_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "10000")
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    assert settings.listen_port == 10000
    assert settings.is_production


@pytest.mark.parametrize("url", [
    "postgres://u:p@host:5432/db",
    "postgresql://u:p@host:5432/db",
])
def test_postgres_urls_use_asyncpg(url):
    settings = Settings(_env_file=None, database_url=url)
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_cors_open_to_all_origins_by_default():
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    assert settings.cors_origins == ["*"]
