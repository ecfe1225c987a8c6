from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

TENANT_SLUG_HEADER = "X-Tenant-Slug"
NOT_SET = "not-set"


@dataclass
class TenantContext:
    """
    Tenant identity resolved for a single request.

    A fresh instance is built for every request by src.core.deps.resolve_tenant_context
    and handed to handlers through dependency injection. None / "" mean unset.
    """

    tenant_id: Optional[UUID] = None
    tenant_slug: str = ""

    @property
    def is_resolved(self) -> bool:
        """True when the slug matched a stored tenant."""
        return self.tenant_id is not None

    def display_id(self) -> str:
        return str(self.tenant_id) if self.is_resolved else NOT_SET

    def display_slug(self) -> str:
        return self.tenant_slug or NOT_SET
