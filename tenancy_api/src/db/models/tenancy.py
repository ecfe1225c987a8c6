from __future__ import annotations

from sqlalchemy import Boolean, String, Text, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, UUIDPkMixin, TimestampMixin, TenantMixin


class Tenant(UUIDPkMixin, TimestampMixin, Base):
    """An isolated customer organization owning a set of users."""
    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(256), nullable=False)
    # Stored lower-cased; uniqueness is enforced by the index.
    slug: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    connection_string: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())


class TenantUser(UUIDPkMixin, TenantMixin, TimestampMixin, Base):
    """User account belonging to exactly one tenant."""
    __tablename__ = "tenant_users"
    __table_args__ = (
        UniqueConstraint("tenant_id", "email", name="uq_tenant_users_tenant_email"),
    )

    email: Mapped[str] = mapped_column(String(256), nullable=False)
    first_name: Mapped[str] = mapped_column(String(256), nullable=False)
    last_name: Mapped[str] = mapped_column(String(256), nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
