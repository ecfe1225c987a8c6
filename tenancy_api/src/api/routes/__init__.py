"""
API route modules.

This package contains subrouters for:
- Health: liveness plus tenant context echo
- Tenants: tenant CRUD
- Tenant Users: user CRUD within a tenant

Routers are included from src.api.main (under the /api prefix).
"""
