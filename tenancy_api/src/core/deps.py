from __future__ import annotations

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.logging import tenant_id_var, tenant_slug_var
from src.core.tenant_context import TENANT_SLUG_HEADER, TenantContext
from src.db.session import get_async_session
from src.repositories.tenant_users import TenantUserRepository
from src.repositories.tenants import TenantRepository, normalize_slug

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def resolve_tenant_context(
    request: Request,
    session: AsyncSession = Depends(get_async_session),
) -> TenantContext:
    """
    Build the TenantContext for the current request from the X-Tenant-Slug header.

    - Missing or blank header: the context stays unset and the request proceeds.
    - Slug owned by a stored tenant: both slug and tenant id are populated.
    - Unknown slug: the slug is recorded, the tenant id stays unset.

    Registered as a router-level dependency so it runs before every handler;
    FastAPI caches it per request, so handlers depending on it get the same instance.
    """
    context = TenantContext()
    raw = request.headers.get(TENANT_SLUG_HEADER)
    if not raw or not raw.strip():
        return context

    context.tenant_slug = normalize_slug(raw)
    tenant_slug_var.set(context.tenant_slug)
    request.state.tenant_slug = context.tenant_slug

    tenant = await TenantRepository(session).get_tenant_by_slug(context.tenant_slug)
    if tenant is None:
        logger.warning("No tenant owns slug %r; tenant context left unresolved", context.tenant_slug)
        return context

    context.tenant_id = tenant.id
    tenant_id_var.set(str(tenant.id))
    logger.debug("Resolved tenant %s from slug %r", tenant.id, context.tenant_slug)
    return context


# PUBLIC_INTERFACE
def get_tenant_repository(session: AsyncSession = Depends(get_async_session)) -> TenantRepository:
    """Provide a TenantRepository bound to the request's session."""
    return TenantRepository(session)


# PUBLIC_INTERFACE
def get_tenant_user_repository(
    session: AsyncSession = Depends(get_async_session),
) -> TenantUserRepository:
    """Provide a TenantUserRepository bound to the request's session."""
    return TenantUserRepository(session)
