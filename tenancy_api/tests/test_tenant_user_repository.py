"""Tests for TenantUserRepository against SQLite."""

import asyncio
from uuid import uuid4

import pytest
from passlib.hash import bcrypt
from sqlalchemy.ext.asyncio import AsyncEngine

from src.core.errors import ConflictError, NotFoundError
from src.db import create_session_maker
from src.db.models.tenancy import TenantUser
from src.repositories.tenant_users import TenantUserRepository
from src.repositories.tenants import TenantRepository


async def _tenant(repo: TenantRepository, slug: str):
    return await repo.create_tenant(name=slug.title(), slug=slug, connection_string="x")


async def _user(repo: TenantUserRepository, tenant_id, email: str = "a@b.com"):
    return await repo.create_user(
        tenant_id=tenant_id,
        email=email,
        first_name="Ada",
        last_name="Lovelace",
        password="s3cret!",
    )


class TestCreateUser:
    """Tests for user creation and per-tenant email uniqueness."""

    @pytest.mark.asyncio
    async def test_creates_active_user_with_hashed_password(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")

        user = await _user(user_repo, tenant.id)

        assert user.tenant_id == tenant.id
        assert user.is_active is True
        assert user.password_hash != "s3cret!"
        assert bcrypt.verify("s3cret!", user.password_hash)

    @pytest.mark.asyncio
    async def test_same_email_in_two_tenants_succeeds(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        """Email uniqueness is scoped to the tenant, not global."""
        acme = await _tenant(tenant_repo, "acme")
        globex = await _tenant(tenant_repo, "globex")

        u1 = await _user(user_repo, acme.id)
        u2 = await _user(user_repo, globex.id)

        assert u1.id != u2.id
        assert u1.email == u2.email

    @pytest.mark.asyncio
    async def test_same_email_in_same_tenant_conflicts(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")
        tenant_id = tenant.id
        await _user(user_repo, tenant_id)

        with pytest.raises(ConflictError):
            await _user(user_repo, tenant_id)

        assert len(await user_repo.list_users_by_tenant(tenant_id)) == 1

    @pytest.mark.asyncio
    async def test_unknown_tenant_raises_not_found(self, user_repo: TenantUserRepository):
        with pytest.raises(NotFoundError):
            await _user(user_repo, uuid4())


class TestReadUsers:
    """Tests for tenant-scoped listing and lookup."""

    @pytest.mark.asyncio
    async def test_list_is_filtered_by_tenant(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        acme = await _tenant(tenant_repo, "acme")
        globex = await _tenant(tenant_repo, "globex")
        await _user(user_repo, acme.id, "a@acme.com")
        await _user(user_repo, acme.id, "b@acme.com")
        await _user(user_repo, globex.id, "a@globex.com")

        users = await user_repo.list_users_by_tenant(acme.id)

        assert sorted(u.email for u in users) == ["a@acme.com", "b@acme.com"]

    @pytest.mark.asyncio
    async def test_list_for_unknown_tenant_is_empty(self, user_repo: TenantUserRepository):
        assert await user_repo.list_users_by_tenant(uuid4()) == []

    @pytest.mark.asyncio
    async def test_get_missing_user_returns_none(self, user_repo: TenantUserRepository):
        assert await user_repo.get_user(uuid4()) is None


class TestUpdateUser:
    """Tests for partial user updates."""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")
        user = await _user(user_repo, tenant.id)

        updated = await user_repo.update_user(user.id, last_name="Byron", is_active=False)

        assert updated.first_name == "Ada"
        assert updated.last_name == "Byron"
        assert updated.is_active is False
        assert updated.email == "a@b.com"

    @pytest.mark.asyncio
    async def test_empty_update_only_bumps_updated_at(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")
        user = await _user(user_repo, tenant.id)
        before = (
            user.email,
            user.first_name,
            user.last_name,
            user.password_hash,
            user.is_active,
            user.created_at,
        )
        previous_updated_at = user.updated_at

        updated = await user_repo.update_user(user.id)

        after = (
            updated.email,
            updated.first_name,
            updated.last_name,
            updated.password_hash,
            updated.is_active,
            updated.created_at,
        )
        assert after == before
        assert updated.updated_at > previous_updated_at

    @pytest.mark.asyncio
    async def test_update_missing_user_raises(self, user_repo: TenantUserRepository):
        with pytest.raises(NotFoundError):
            await user_repo.update_user(uuid4(), first_name="X")


class TestDeleteUser:
    """Tests for user deletes and the tenant cascade."""

    @pytest.mark.asyncio
    async def test_deleted_user_is_not_found(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")
        user = await _user(user_repo, tenant.id)
        user_id = user.id

        await user_repo.delete_user(user_id)

        assert await user_repo.get_user(user_id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_user_raises(self, user_repo: TenantUserRepository):
        with pytest.raises(NotFoundError):
            await user_repo.delete_user(uuid4())

    @pytest.mark.asyncio
    async def test_deleting_tenant_removes_its_users(
        self, tenant_repo: TenantRepository, user_repo: TenantUserRepository
    ):
        acme = await _tenant(tenant_repo, "acme")
        globex = await _tenant(tenant_repo, "globex")
        doomed = await _user(user_repo, acme.id)
        doomed_id = doomed.id
        survivor = await _user(user_repo, globex.id)
        acme_id = acme.id

        await tenant_repo.delete_tenant(acme_id)

        assert await user_repo.list_users_by_tenant(acme_id) == []
        assert await user_repo.get_user(doomed_id) is None
        assert await user_repo.get_user(survivor.id) is not None


class TestConcurrentCreate:
    """Concurrent writers racing for the same (tenant, email)."""

    @pytest.mark.asyncio
    async def test_only_one_writer_wins_an_email(
        self, engine: AsyncEngine, tenant_repo: TenantRepository
    ):
        tenant = await _tenant(tenant_repo, "acme")
        tenant_id = tenant.id
        maker = create_session_maker(engine)

        async def _create():
            async with maker() as session:
                return await _user(TenantUserRepository(session), tenant_id)

        results = await asyncio.gather(*(_create() for _ in range(4)), return_exceptions=True)

        assert sum(isinstance(r, TenantUser) for r in results) == 1
        assert sum(isinstance(r, ConflictError) for r in results) == 3
        async with maker() as session:
            users = await TenantUserRepository(session).list_users_by_tenant(tenant_id)
        assert len(users) == 1
