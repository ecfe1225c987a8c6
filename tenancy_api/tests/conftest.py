"""Shared fixtures: a throwaway SQLite database per test."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import NullPool

from src.api.main import app
from src.db import Base, create_engine_for_url, create_session_maker, get_async_session
from src.repositories import TenantRepository, TenantUserRepository


async def _create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """SQLite file URL unique to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'tenancy.db'}"


@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine_for_url(database_url, poolclass=NullPool)
    await _create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with create_session_maker(engine)() as session:
        yield session


@pytest.fixture
def tenant_repo(session: AsyncSession) -> TenantRepository:
    return TenantRepository(session)


@pytest.fixture
def user_repo(session: AsyncSession) -> TenantUserRepository:
    return TenantUserRepository(session)


@pytest.fixture
def client(database_url: str) -> Iterator[TestClient]:
    """
    TestClient whose request sessions point at the test database.

    NullPool keeps connections from being shared across the event loops used
    by schema setup and by the client.
    """
    engine = create_engine_for_url(database_url, poolclass=NullPool)
    asyncio.run(_create_schema(engine))
    maker = create_session_maker(engine)

    async def _session_override() -> AsyncGenerator[AsyncSession, None]:
        async with maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = _session_override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_async_session, None)
        asyncio.run(engine.dispose())
