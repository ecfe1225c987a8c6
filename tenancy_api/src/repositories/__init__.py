"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for tenants and tenant users and
translate constraint violations into src.core.errors exceptions.
"""

from .tenant_users import TenantUserRepository  # noqa: F401
from .tenants import TenantRepository, normalize_slug  # noqa: F401
