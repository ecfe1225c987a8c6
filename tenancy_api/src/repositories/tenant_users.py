from __future__ import annotations

import asyncio
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.core.errors import ConflictError, NotFoundError
from src.core.security import get_password_hash
from src.db.models.tenancy import Tenant, TenantUser
from .base import BaseRepository

logger = logging.getLogger(__name__)


class TenantUserRepository(BaseRepository):
    """Repository for users. Listing is the tenant-scoped read."""

    async def list_users_by_tenant(self, tenant_id: UUID) -> List[TenantUser]:
        stmt = (
            select(TenantUser)
            .where(TenantUser.tenant_id == tenant_id)
            .order_by(TenantUser.created_at, TenantUser.id)
        )
        result = await self.scalars(stmt)
        return list(result)

    async def get_user(self, user_id: UUID) -> Optional[TenantUser]:
        stmt = select(TenantUser).where(TenantUser.id == user_id)
        return await self.scalar_one_or_none(stmt)

    async def create_user(
        self,
        *,
        tenant_id: UUID,
        email: str,
        first_name: str,
        last_name: str,
        password: str,
    ) -> TenantUser:
        """
        Insert a user under an existing tenant.

        Raises:
            NotFoundError: the tenant does not exist.
            ConflictError: the email is already registered for this tenant.
        """
        tenant = await self.scalar_one_or_none(select(Tenant.id).where(Tenant.id == tenant_id))
        if tenant is None:
            raise NotFoundError(f"Tenant {tenant_id} not found")

        # bcrypt is deliberately slow; keep it off the event loop.
        password_hash = await asyncio.to_thread(get_password_hash, password)
        user = TenantUser(
            tenant_id=tenant_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            is_active=True,
        )
        await self.add(user)
        try:
            await self.commit()
        except IntegrityError as exc:
            await self.rollback()
            logger.info("Rejected user create: %r already exists in tenant %s", email, tenant_id)
            raise ConflictError(
                "Email already exists for this tenant",
                details={"tenantId": str(tenant_id), "email": email},
            ) from exc
        logger.info("Created user %s in tenant %s", user.id, tenant_id)
        return user

    async def update_user(
        self,
        user_id: UUID,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> TenantUser:
        """Overwrite only the supplied fields. Email and password are not updatable here."""
        user = await self.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        if first_name is not None:
            user.first_name = first_name
        if last_name is not None:
            user.last_name = last_name
        if is_active is not None:
            user.is_active = is_active
        user.touch()

        await self.commit()
        return user

    async def delete_user(self, user_id: UUID) -> None:
        user = await self.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        await self.delete(user)
        await self.commit()
        logger.info("Deleted user %s", user_id)
