"""
Skill repository - data access for Skill entity.
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.models.skill import Skill, SKILL_OFFERING
from skilltrade.models.user import User
from skilltrade.repositories.base import BaseRepository


def _escape_like(value: str) -> str:
    """Make %, _ and the escape character match literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[Skill]:
        """All skills of a user, newest first."""
        result = await db.execute(
            select(Skill)
            .where(Skill.user_id == user_id)
            .order_by(Skill.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_owned(
        self,
        db: AsyncSession,
        user_id: UUID,
        skill_id: UUID,
    ) -> Optional[Skill]:
        """Get a skill only if it belongs to user_id."""
        result = await db.execute(
            select(Skill).where(
                Skill.id == skill_id,
                Skill.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def delete_all_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        result = await db.execute(
            delete(Skill).where(Skill.user_id == user_id)
        )
        return result.rowcount

    async def find_discoverable(
        self,
        db: AsyncSession,
        *,
        exclude_user_id: UUID,
        query: Optional[str] = None,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Tuple[Skill, User]]:
        """
        Offering skills of other active users, newest first.

        `query` matches name or description case-insensitively.
        """
        stmt = (
            select(Skill, User)
            .join(User, Skill.user_id == User.id)
            .where(
                Skill.type == SKILL_OFFERING,
                Skill.user_id != exclude_user_id,
                User.is_active == True,
            )
        )

        if query:
            pattern = f"%{_escape_like(query)}%"
            stmt = stmt.where(
                or_(
                    Skill.name.ilike(pattern, escape="\\"),
                    Skill.description.ilike(pattern, escape="\\"),
                )
            )

        if category:
            stmt = stmt.where(Skill.category == category)

        stmt = stmt.order_by(Skill.created_at.desc()).offset(offset).limit(limit)

        result = await db.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]
