"""
ORM models for tenants and their users.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .tenancy import (  # noqa: F401
    Tenant,
    TenantUser,
)
