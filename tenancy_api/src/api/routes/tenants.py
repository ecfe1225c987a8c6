from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, Response, status

from src.core.deps import get_tenant_repository
from src.core.errors import NotFoundError
from src.repositories.tenants import TenantRepository
from src.schemas.tenancy import TenantCreate, TenantRead, TenantUpdate

router = APIRouter(prefix="/tenants", tags=["Tenants"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TenantRead],
    summary="List tenants",
    description="List all tenants. Administrative scope, not filtered by tenant context.",
)
async def list_tenants(
    repo: TenantRepository = Depends(get_tenant_repository),
) -> List[TenantRead]:
    tenants = await repo.list_tenants()
    return [TenantRead.model_validate(t) for t in tenants]


# PUBLIC_INTERFACE
@router.get(
    "/{tenant_id}",
    response_model=TenantRead,
    summary="Get tenant",
)
async def get_tenant(
    tenant_id: UUID = Path(...),
    repo: TenantRepository = Depends(get_tenant_repository),
) -> TenantRead:
    tenant = await repo.get_tenant(tenant_id)
    if tenant is None:
        raise NotFoundError(f"Tenant {tenant_id} not found")
    return TenantRead.model_validate(tenant)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TenantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
    description="Create a tenant. The slug is stored lower-cased; a taken slug returns 400.",
)
async def create_tenant(
    payload: TenantCreate,
    request: Request,
    response: Response,
    repo: TenantRepository = Depends(get_tenant_repository),
) -> TenantRead:
    tenant = await repo.create_tenant(
        name=payload.name,
        slug=payload.slug,
        connection_string=payload.connection_string,
    )
    response.headers["Location"] = str(request.url_for("get_tenant", tenant_id=tenant.id))
    return TenantRead.model_validate(tenant)


# PUBLIC_INTERFACE
@router.put(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update tenant",
    description="Partially update a tenant. Omitted fields are left unchanged.",
)
async def update_tenant(
    payload: TenantUpdate,
    tenant_id: UUID = Path(...),
    repo: TenantRepository = Depends(get_tenant_repository),
) -> None:
    await repo.update_tenant(tenant_id, name=payload.name, is_active=payload.is_active)


# PUBLIC_INTERFACE
@router.delete(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete tenant",
    description="Hard-delete a tenant and all of its users.",
)
async def delete_tenant(
    tenant_id: UUID = Path(...),
    repo: TenantRepository = Depends(get_tenant_repository),
) -> None:
    await repo.delete_tenant(tenant_id)
