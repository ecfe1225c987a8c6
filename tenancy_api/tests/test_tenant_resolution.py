"""Unit tests for the X-Tenant-Slug resolver dependency."""

from __future__ import annotations

import logging

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from src.core.deps import resolve_tenant_context
from src.core.logging import tenant_id_var
from src.core.tenant_context import NOT_SET, TenantContext
from src.repositories.tenants import TenantRepository


def _request(slug: str | None = None) -> Request:
    headers = [] if slug is None else [(b"x-tenant-slug", slug.encode())]
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/api/health",
            "query_string": b"",
            "headers": headers,
        }
    )


class TestTenantContext:
    """Tests for the TenantContext carrier."""

    def test_starts_unset(self):
        context = TenantContext()

        assert context.tenant_id is None
        assert context.tenant_slug == ""
        assert context.is_resolved is False
        assert context.display_id() == NOT_SET
        assert context.display_slug() == NOT_SET

    def test_instances_are_independent(self):
        first = TenantContext()
        first.tenant_slug = "acme"

        assert TenantContext().tenant_slug == ""


class TestResolveTenantContext:
    """Tests for resolve_tenant_context()."""

    @pytest.mark.asyncio
    async def test_missing_header_leaves_context_unset(self, session: AsyncSession):
        context = await resolve_tenant_context(_request(), session)

        assert context == TenantContext()

    @pytest.mark.asyncio
    async def test_blank_header_leaves_context_unset(self, session: AsyncSession):
        context = await resolve_tenant_context(_request("   "), session)

        assert context == TenantContext()

    @pytest.mark.asyncio
    async def test_known_slug_resolves_tenant_id(
        self, session: AsyncSession, tenant_repo: TenantRepository
    ):
        tenant = await tenant_repo.create_tenant(name="Acme", slug="acme-corp", connection_string="x")

        context = await resolve_tenant_context(_request("acme-corp"), session)

        assert context.tenant_slug == "acme-corp"
        assert context.tenant_id == tenant.id
        assert context.is_resolved
        assert tenant_id_var.get() == str(tenant.id)

    @pytest.mark.asyncio
    async def test_header_is_normalized_before_lookup(
        self, session: AsyncSession, tenant_repo: TenantRepository
    ):
        tenant = await tenant_repo.create_tenant(name="Acme", slug="acme-corp", connection_string="x")

        context = await resolve_tenant_context(_request(" Acme-Corp "), session)

        assert context.tenant_slug == "acme-corp"
        assert context.tenant_id == tenant.id

    @pytest.mark.asyncio
    async def test_unknown_slug_keeps_slug_without_id(self, session: AsyncSession, caplog):
        with caplog.at_level(logging.WARNING, logger="src.core.deps"):
            context = await resolve_tenant_context(_request("ghost"), session)

        assert context.tenant_slug == "ghost"
        assert context.tenant_id is None
        assert "ghost" in caplog.text
