from __future__ import annotations

from typing import Any

from sqlalchemy import Executable
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """
    Base class for repositories providing common helpers around one AsyncSession.

    Repositories commit their own writes; uniqueness is left to the database
    constraints so concurrent writers are arbitrated atomically.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement)

    async def scalars(self, statement: Executable):
        """Execute and return scalars."""
        result = await self.execute(statement)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back current transaction."""
        await self.session.rollback()

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)

    async def delete(self, entity: Any) -> None:
        """Mark a single entity for deletion."""
        await self.session.delete(entity)
