from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, Response, status

from src.core.deps import get_tenant_user_repository
from src.core.errors import NotFoundError
from src.repositories.tenant_users import TenantUserRepository
from src.schemas.tenancy import TenantUserCreate, TenantUserRead, TenantUserUpdate

router = APIRouter(prefix="/tenantusers", tags=["Tenant Users"])


# PUBLIC_INTERFACE
@router.get(
    "/tenant/{tenant_id}",
    response_model=List[TenantUserRead],
    summary="List users of a tenant",
)
async def list_users_by_tenant(
    tenant_id: UUID = Path(...),
    repo: TenantUserRepository = Depends(get_tenant_user_repository),
) -> List[TenantUserRead]:
    users = await repo.list_users_by_tenant(tenant_id)
    return [TenantUserRead.model_validate(u) for u in users]


# PUBLIC_INTERFACE
@router.get(
    "/{user_id}",
    response_model=TenantUserRead,
    summary="Get user",
)
async def get_user(
    user_id: UUID = Path(...),
    repo: TenantUserRepository = Depends(get_tenant_user_repository),
) -> TenantUserRead:
    user = await repo.get_user(user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} not found")
    return TenantUserRead.model_validate(user)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TenantUserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description=(
        "Create a user under an existing tenant. The email must be unique within "
        "the tenant (400 otherwise); an unknown tenant returns 404."
    ),
)
async def create_user(
    payload: TenantUserCreate,
    request: Request,
    response: Response,
    repo: TenantUserRepository = Depends(get_tenant_user_repository),
) -> TenantUserRead:
    user = await repo.create_user(
        tenant_id=payload.tenant_id,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        password=payload.password,
    )
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return TenantUserRead.model_validate(user)


# PUBLIC_INTERFACE
@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update user",
    description="Partially update a user's names or active flag.",
)
async def update_user(
    payload: TenantUserUpdate,
    user_id: UUID = Path(...),
    repo: TenantUserRepository = Depends(get_tenant_user_repository),
) -> None:
    await repo.update_user(
        user_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        is_active=payload.is_active,
    )


# PUBLIC_INTERFACE
@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
)
async def delete_user(
    user_id: UUID = Path(...),
    repo: TenantUserRepository = Depends(get_tenant_user_repository),
) -> None:
    await repo.delete_user(user_id)
