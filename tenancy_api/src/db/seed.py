"""
Database seeding utilities.

Seeds:
- The default tenant (DEFAULT_TENANT_NAME / DEFAULT_TENANT_SLUG)

Usage:
  python -m src.db.run_migrations upgrade head
  python -m src.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import ConflictError
from src.core.settings import AppSettings, get_app_settings
from src.db.session import get_session_maker
from src.repositories.tenants import TenantRepository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def seed_all(settings: Optional[AppSettings] = None) -> None:
    """
    Seed the database with minimal reference data.

    Safe to run repeatedly; existing records are left untouched.
    """
    settings = settings or get_app_settings()
    async with get_session_maker()() as session:
        await ensure_default_tenant(
            session,
            name=settings.DEFAULT_TENANT_NAME,
            slug=settings.DEFAULT_TENANT_SLUG,
            connection_string=settings.DEFAULT_TENANT_CONNECTION_STRING,
        )


# PUBLIC_INTERFACE
async def ensure_default_tenant(
    session: AsyncSession,
    name: str,
    slug: str,
    connection_string: str,
) -> UUID:
    """
    Ensure a tenant owning `slug` exists and return its id.

    A concurrent seeder winning the insert is tolerated: the conflict is
    swallowed and the winner's row is returned.
    """
    repo = TenantRepository(session)
    existing = await repo.get_tenant_by_slug(slug)
    if existing is not None:
        return existing.id

    try:
        tenant = await repo.create_tenant(name=name, slug=slug, connection_string=connection_string)
        logger.info("Seeded default tenant %s (slug=%s)", tenant.id, tenant.slug)
        return tenant.id
    except ConflictError:
        raced = await repo.get_tenant_by_slug(slug)
        if raced is None:
            raise RuntimeError("Failed to create or load default tenant")
        return raced.id


if __name__ == "__main__":
    from src.core.logging import configure_logging

    configure_logging()
    asyncio.run(seed_all())
