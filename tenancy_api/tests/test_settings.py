"""Unit tests for application and database settings."""

import pytest

from src.core.settings import AppSettings
from src.db.config import Settings


class TestAppSettings:
    """Tests for AppSettings parsing."""

    def test_cors_origins_accepts_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")

        settings = AppSettings(_env_file=None)

        assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_cors_origins_accepts_json_array(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://a.example"]')

        settings = AppSettings(_env_file=None)

        assert settings.CORS_ORIGINS == ["http://a.example"]

    def test_cors_origins_default_wildcard(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        assert AppSettings(_env_file=None).CORS_ORIGINS == ["*"]

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert AppSettings(_env_file=None).LOG_LEVEL == "DEBUG"


class TestDatabaseSettings:
    """Tests for database URL resolution."""

    def test_database_url_takes_precedence(self):
        settings = Settings(
            _env_file=None,
            DATABASE_URL="sqlite:///./tenancy.db",
            POSTGRES_URL="postgresql://u:p@h/db",
        )

        assert settings.async_database_url == "sqlite+aiosqlite:///./tenancy.db"
        assert settings.sync_database_url == "sqlite:///./tenancy.db"
        assert settings.is_sqlite

    def test_postgres_url_normalized_to_asyncpg(self):
        settings = Settings(_env_file=None, DATABASE_URL=None, POSTGRES_URL="postgresql+psycopg2://u:p@h:5432/db")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@h:5432/db"
        assert settings.sync_database_url == "postgresql://u:p@h:5432/db"
        assert not settings.is_sqlite

    def test_url_built_from_parts(self):
        settings = Settings(
            _env_file=None,
            DATABASE_URL=None,
            POSTGRES_URL=None,
            POSTGRES_USER="u",
            POSTGRES_PASSWORD="p",
            POSTGRES_DB="db",
            POSTGRES_HOST="dbhost",
            POSTGRES_PORT=6543,
        )

        assert settings.database_url == "postgresql://u:p@dbhost:6543/db"

    def test_missing_configuration_raises(self):
        settings = Settings(
            _env_file=None,
            DATABASE_URL=None,
            POSTGRES_URL=None,
            POSTGRES_USER=None,
            POSTGRES_PASSWORD=None,
            POSTGRES_DB=None,
        )

        with pytest.raises(ValueError):
            _ = settings.database_url
