from __future__ import annotations

import re
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the database layer.

    Reads from environment variables (or .env via pydantic-settings). Either:
      - DATABASE_URL: any SQLAlchemy async URL (e.g. sqlite+aiosqlite:///./tenancy.db)
      - POSTGRES_URL, or POSTGRES_USER / POSTGRES_PASSWORD / POSTGRES_DB
        (plus optional POSTGRES_HOST / POSTGRES_PORT)
    """

    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL. Takes precedence over the POSTGRES_* variables.",
    )

    POSTGRES_URL: Optional[str] = Field(
        default=None, description="If provided, full PostgreSQL connection URL."
    )
    POSTGRES_USER: Optional[str] = Field(default=None, description="DB username")
    POSTGRES_PASSWORD: Optional[str] = Field(default=None, description="DB password")
    POSTGRES_DB: Optional[str] = Field(default=None, description="Database name")
    POSTGRES_PORT: Optional[int] = Field(
        default=5432, description="Database port (default 5432)"
    )
    POSTGRES_HOST: Optional[str] = Field(
        default="localhost", description="Database host (default localhost)"
    )

    # SQLAlchemy engine options
    SQL_ECHO: bool = Field(
        default=False, description="Echo SQL statements for debugging (default False)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """
        Compute the base database URL. Prefers DATABASE_URL, then POSTGRES_URL,
        otherwise constructs one from the individual POSTGRES_* variables.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.POSTGRES_URL:
            return self.POSTGRES_URL

        if not all([self.POSTGRES_USER, self.POSTGRES_PASSWORD, self.POSTGRES_DB]):
            raise ValueError(
                "Database configuration missing. Ensure DATABASE_URL, POSTGRES_URL or "
                "POSTGRES_USER, POSTGRES_PASSWORD, and POSTGRES_DB are set in the environment."
            )
        host = self.POSTGRES_HOST or "localhost"
        port = self.POSTGRES_PORT or 5432
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{host}:{port}/{self.POSTGRES_DB}"

    @property
    def async_database_url(self) -> str:
        """
        Convert the base URL to an async driver URL, required for AsyncEngine.

        postgresql URLs are normalized to postgresql+asyncpg, sqlite URLs to
        sqlite+aiosqlite. Other URLs are returned unchanged.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg://") or url.startswith("sqlite+aiosqlite://"):
            return url
        if re.match(r"^postgres(ql)?(\+\w+)?://", url):
            return re.sub(r"^postgres(ql)?(\+\w+)?://", "postgresql+asyncpg://", url)
        if re.match(r"^sqlite(\+\w+)?://", url):
            return re.sub(r"^sqlite(\+\w+)?://", "sqlite+aiosqlite://", url)
        return url

    @property
    def sync_database_url(self) -> str:
        """
        Provide a sync URL variant for Alembic offline mode by stripping any driver tag.
        """
        return re.sub(r"^(postgresql|sqlite)\+\w+://", r"\1://", self.async_database_url)

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return a settings object for reuse across modules."""
    # Settings is cheap to construct; for simplicity, we return a new instance.
    return Settings()
