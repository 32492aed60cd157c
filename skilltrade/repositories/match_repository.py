"""
Match repository - data access for swipes and matches.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from skilltrade.models.match import Match, MATCH_ACCEPTED
from skilltrade.models.skill import Skill, SKILL_OFFERING, SKILL_SEEKING
from skilltrade.models.user import User
from skilltrade.repositories.base import BaseRepository


class MatchRepository(BaseRepository[Match]):
    def __init__(self):
        super().__init__(Match)

    async def get_directed(
        self,
        db: AsyncSession,
        user1_id: UUID,
        user2_id: UUID,
    ) -> Optional[Match]:
        """The swipe user1 made on user2, if any."""
        result = await db.execute(
            select(Match).where(
                Match.user1_id == user1_id,
                Match.user2_id == user2_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_accepted_between(
        self,
        db: AsyncSession,
        user_a: UUID,
        user_b: UUID,
    ) -> Optional[Match]:
        """The accepted match between two users, whichever direction it was stored in."""
        result = await db.execute(
            select(Match).where(
                Match.status == MATCH_ACCEPTED,
                or_(
                    and_(Match.user1_id == user_a, Match.user2_id == user_b),
                    and_(Match.user1_id == user_b, Match.user2_id == user_a),
                ),
            ).limit(1)
        )
        return result.scalar_one_or_none()

    async def list_accepted(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[Match]:
        """Accepted matches with both users loaded, most recent first."""
        result = await db.execute(
            select(Match)
            .options(selectinload(Match.user1), selectinload(Match.user2))
            .where(
                Match.status == MATCH_ACCEPTED,
                or_(Match.user1_id == user_id, Match.user2_id == user_id),
            )
            .order_by(Match.updated_at.desc())
        )
        return list(result.scalars().all())

    async def find_candidates(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        limit: int = 10,
    ) -> List[User]:
        """
        Users offering something user_id is seeking.

        Excludes users already swiped by user_id and users already matched
        with them. Users who liked user_id stay visible so the like can be
        returned. Order is random.
        """
        seeking_names = select(func.lower(Skill.name)).where(
            Skill.user_id == user_id,
            Skill.type == SKILL_SEEKING,
        )
        offering_users = select(Skill.user_id).where(
            Skill.type == SKILL_OFFERING,
            func.lower(Skill.name).in_(seeking_names),
        )
        swiped = select(Match.user2_id).where(Match.user1_id == user_id)
        matched_me = select(Match.user1_id).where(
            Match.user2_id == user_id,
            Match.status == MATCH_ACCEPTED,
        )

        result = await db.execute(
            select(User)
            .options(selectinload(User.skills))
            .where(
                User.id != user_id,
                User.is_active == True,
                User.id.in_(offering_users),
                User.id.not_in(swiped),
                User.id.not_in(matched_me),
            )
            .order_by(func.random())
            .limit(limit)
        )
        return list(result.scalars().all())
