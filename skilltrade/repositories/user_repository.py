"""
User repository - data access for User entity.
"""
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.models.user import User
from skilltrade.models.skill import Skill
from skilltrade.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Optional[User]:
        """Find a user by email address."""
        result = await db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def get_active_by_id(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> Optional[User]:
        """Find an active user by ID."""
        result = await db.execute(
            select(User).where(
                User.id == user_id,
                User.is_active == True,
            )
        )
        return result.scalar_one_or_none()

    async def get_many_by_ids(
        self,
        db: AsyncSession,
        user_ids: Iterable[UUID],
    ) -> List[User]:
        ids = list(user_ids)
        if not ids:
            return []
        result = await db.execute(select(User).where(User.id.in_(ids)))
        return list(result.scalars().all())

    async def lock_many(
        self,
        db: AsyncSession,
        user_ids: Iterable[UUID],
    ) -> List[User]:
        """
        Load users with a row lock for the rest of the transaction.

        Rows are locked in id order so two transactions touching the same
        pair cannot deadlock.
        """
        result = await db.execute(
            select(User)
            .where(User.id.in_(list(user_ids)))
            .order_by(User.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def count_skills(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        """Count skills for a user."""
        result = await db.execute(
            select(func.count(Skill.id)).where(Skill.user_id == user_id)
        )
        return result.scalar() or 0

    async def email_exists(
        self,
        db: AsyncSession,
        email: str,
    ) -> bool:
        """Check if an email is already registered."""
        result = await db.execute(
            select(User.id).where(User.email == email)
        )
        return result.scalar_one_or_none() is not None
