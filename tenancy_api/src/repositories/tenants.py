from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from src.core.errors import ConflictError, NotFoundError
from src.db.models.tenancy import Tenant, TenantUser
from .base import BaseRepository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def normalize_slug(slug: str) -> str:
    """Return the canonical (stripped, lower-cased) form of a tenant slug."""
    return slug.strip().lower()


class TenantRepository(BaseRepository):
    """
    Repository for tenants. Administrative scope: no tenant filtering is applied.
    """

    async def list_tenants(self) -> List[Tenant]:
        stmt = select(Tenant).order_by(Tenant.created_at, Tenant.id)
        result = await self.scalars(stmt)
        return list(result)

    async def get_tenant(self, tenant_id: UUID) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        return await self.scalar_one_or_none(stmt)

    async def get_tenant_by_slug(self, slug: str) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.slug == normalize_slug(slug))
        return await self.scalar_one_or_none(stmt)

    async def create_tenant(
        self,
        *,
        name: str,
        slug: str,
        connection_string: str,
    ) -> Tenant:
        """
        Insert a tenant with a lower-cased slug.

        Raises:
            ConflictError: another tenant already owns the slug. Detected by the
                unique constraint, so concurrent creators cannot both succeed.
        """
        normalized = normalize_slug(slug)
        tenant = Tenant(
            name=name,
            slug=normalized,
            connection_string=connection_string,
            is_active=True,
        )
        await self.add(tenant)
        try:
            await self.commit()
        except IntegrityError as exc:
            await self.rollback()
            logger.info("Rejected tenant create: slug %r already taken", normalized)
            raise ConflictError(
                f"Tenant with slug '{normalized}' already exists",
                details={"slug": normalized},
            ) from exc
        logger.info("Created tenant %s (slug=%s)", tenant.id, tenant.slug)
        return tenant

    async def update_tenant(
        self,
        tenant_id: UUID,
        *,
        name: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Tenant:
        """Overwrite only the supplied fields and refresh updated_at."""
        tenant = await self.get_tenant(tenant_id)
        if tenant is None:
            raise NotFoundError(f"Tenant {tenant_id} not found")

        if name is not None:
            tenant.name = name
        if is_active is not None:
            tenant.is_active = is_active
        tenant.touch()

        await self.commit()
        return tenant

    async def delete_tenant(self, tenant_id: UUID) -> None:
        """Hard-delete a tenant together with all of its users."""
        tenant = await self.get_tenant(tenant_id)
        if tenant is None:
            raise NotFoundError(f"Tenant {tenant_id} not found")

        result = await self.execute(delete(TenantUser).where(TenantUser.tenant_id == tenant_id))
        await self.delete(tenant)
        await self.commit()
        logger.info("Deleted tenant %s and %d user(s)", tenant_id, result.rowcount or 0)
