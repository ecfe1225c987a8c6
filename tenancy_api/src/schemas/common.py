from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema serialized with camelCase keys.

    Input accepts both camelCase and snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(CamelModel):
    """Liveness response echoing the resolved tenant context."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Server time (UTC)")
    tenant_id: str = Field(..., description="Resolved tenant id or 'not-set'")
    tenant_slug: str = Field(..., description="Tenant slug from X-Tenant-Slug or 'not-set'")


class ErrorInfo(CamelModel):
    """Structured error description."""
    type: str = Field(..., description="Machine-readable error type code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Optional error details (e.g., validation issues)")


# PUBLIC_INTERFACE
class ErrorResponse(CamelModel):
    """Standardized API error envelope returned by exception handlers."""
    status: int = Field(..., description="HTTP status code")
    error: ErrorInfo = Field(..., description="Error details")
    correlation_id: Optional[str] = Field(default=None, description="Request correlation ID")
    tenant_slug: Optional[str] = Field(default=None, description="Tenant slug (if supplied)")
    path: Optional[str] = Field(default=None, description="Request path")
    method: Optional[str] = Field(default=None, description="HTTP method")
    timestamp: datetime = Field(..., description="Error timestamp (UTC)")
