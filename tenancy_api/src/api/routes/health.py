from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.core.deps import resolve_tenant_context
from src.core.tenant_context import TenantContext
from src.schemas.common import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=HealthResponse,
    summary="Health Check",
    description="Liveness probe that also echoes the tenant context resolved from X-Tenant-Slug.",
)
async def health(context: TenantContext = Depends(resolve_tenant_context)) -> HealthResponse:
    """
    Report liveness and the tenant context of this request.

    Returns:
        HealthResponse: tenantId / tenantSlug are "not-set" when nothing was resolved.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(tz=timezone.utc),
        tenant_id=context.display_id(),
        tenant_slug=context.display_slug(),
    )
