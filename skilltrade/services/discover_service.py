"""
Discover service - browse skills other members offer.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.models.user import User
from skilltrade.repositories.skill_repository import SkillRepository
from skilltrade.schemas.base import Pagination
from skilltrade.schemas.discover import DiscoverResponse, DiscoverSkill
from skilltrade.schemas.user import CHAT_AVATAR
from skilltrade.services.profile_service import user_card


class DiscoverService:
    def __init__(self):
        self.skill_repo = SkillRepository()

    async def discover(
        self,
        db: AsyncSession,
        user: User,
        *,
        q: Optional[str] = None,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> DiscoverResponse:
        rows = await self.skill_repo.find_discoverable(
            db,
            exclude_user_id=user.id,
            query=q.strip() if q else None,
            category=category or None,
            limit=limit,
            offset=offset,
        )

        skills = [
            DiscoverSkill(
                id=skill.id,
                title=skill.name,
                description=skill.description
                or f"Learn {skill.name} from an experienced practitioner",
                category=skill.category,
                proficiency_level=skill.proficiency_level,
                user=user_card(owner, default_avatar=CHAT_AVATAR),
                tags=[skill.category, skill.name],
            )
            for skill, owner in rows
        ]

        return DiscoverResponse(
            skills=skills,
            pagination=Pagination(
                limit=limit,
                offset=offset,
                has_more=len(skills) == limit,
            ),
        )
