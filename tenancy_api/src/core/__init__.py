"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Logging configuration with request context
- Domain errors and password hashing
- The per-request TenantContext and the FastAPI dependencies that build it
"""
