from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from .common import CamelModel

MAX_LENGTH = 256
# Unreserved URI characters; slugs travel in headers and URLs.
SLUG_PATTERN = r"^[A-Za-z0-9._~-]+$"


class TenantRead(CamelModel):
    """Tenant read model."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Tenant ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="Lower-cased unique slug")
    connection_string: str = Field(..., description="Opaque connection string")
    is_active: bool = Field(..., description="Active flag")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")


class TenantCreate(CamelModel):
    """Create tenant payload."""
    name: str = Field(..., min_length=1, max_length=MAX_LENGTH, description="Display name")
    slug: str = Field(
        ...,
        min_length=1,
        max_length=MAX_LENGTH,
        pattern=SLUG_PATTERN,
        description="Unique slug; stored lower-cased",
    )
    connection_string: str = Field(..., min_length=1, description="Opaque connection string")


class TenantUpdate(CamelModel):
    """Partial tenant update; omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1, max_length=MAX_LENGTH)
    is_active: Optional[bool] = Field(None)


class TenantUserRead(CamelModel):
    """Tenant user read model. The password hash is never exposed."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="User ID")
    tenant_id: UUID = Field(..., description="Owning tenant ID")
    email: str = Field(..., description="Email, unique within the tenant")
    first_name: str = Field(...)
    last_name: str = Field(...)
    is_active: bool = Field(..., description="Active flag")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")


class TenantUserCreate(CamelModel):
    """Create tenant user payload."""
    tenant_id: UUID = Field(..., description="Owning tenant ID")
    email: str = Field(..., min_length=1, max_length=MAX_LENGTH, description="Email; stored exactly as given")
    first_name: str = Field(..., min_length=1, max_length=MAX_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=MAX_LENGTH)
    password: str = Field(..., min_length=1, description="Plaintext password; stored as a bcrypt hash")


class TenantUserUpdate(CamelModel):
    """Partial user update; email and password cannot be changed here."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=MAX_LENGTH)
    last_name: Optional[str] = Field(None, min_length=1, max_length=MAX_LENGTH)
    is_active: Optional[bool] = Field(None)
