"""
Public Pydantic schemas used by FastAPI routes and tests.

All schemas serialize with camelCase keys (see CamelModel).
"""

from .common import ErrorResponse, HealthResponse  # noqa: F401
from .tenancy import (  # noqa: F401
    TenantCreate,
    TenantRead,
    TenantUpdate,
    TenantUserCreate,
    TenantUserRead,
    TenantUserUpdate,
)
