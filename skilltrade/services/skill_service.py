"""
Skill service - business logic for a user's offered and sought skills.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.exceptions import SkillNotFoundException
from skilltrade.core.logging import get_logger
from skilltrade.models.skill import Skill, SKILL_OFFERING, SKILL_SEEKING
from skilltrade.models.user import User
from skilltrade.repositories.skill_repository import SkillRepository
from skilltrade.schemas.skill import SkillResponse, SkillsByType
from skilltrade.services.profile_service import ProfileService

logger = get_logger(__name__)


class SkillService:
    """Handles listing, adding, replacing and deleting skills."""

    def __init__(self):
        self.skill_repo = SkillRepository()
        self.profile_service = ProfileService()

    async def list_skills(
        self,
        db: AsyncSession,
        user: User,
    ) -> SkillsByType:
        skills = await self.skill_repo.list_for_user(db, user.id)
        return SkillsByType(
            offering=[self._to_response(s) for s in skills if s.type == SKILL_OFFERING],
            seeking=[self._to_response(s) for s in skills if s.type == SKILL_SEEKING],
        )

    async def add_skill(
        self,
        db: AsyncSession,
        user: User,
        *,
        name: str,
        type: str,
        category: Optional[str] = None,
        proficiency_level: int = 1,
        description: Optional[str] = None,
    ) -> SkillResponse:
        skill = await self.skill_repo.create(
            db,
            user_id=user.id,
            name=name,
            category=category or settings.default_skill_category,
            type=type,
            proficiency_level=proficiency_level,
            description=description,
        )
        await self.profile_service.refresh_completion(db, user)
        await db.commit()

        logger.info("skill_added", user_id=str(user.id), skill_id=str(skill.id), type=type)
        return self._to_response(skill)

    async def replace_skills(
        self,
        db: AsyncSession,
        user: User,
        *,
        offering: List[str],
        seeking: List[str],
    ) -> None:
        """
        Replace every skill of the user in one transaction.

        Either all old skills are gone and all new ones stored, or nothing changed.
        """
        user_id = user.id
        try:
            await self.skill_repo.delete_all_for_user(db, user_id)
            for skill_type, names in ((SKILL_OFFERING, offering), (SKILL_SEEKING, seeking)):
                for name in names:
                    db.add(
                        Skill(
                            user_id=user_id,
                            name=name,
                            category=settings.default_skill_category,
                            type=skill_type,
                            proficiency_level=1,
                        )
                    )
            await db.flush()
            await self.profile_service.refresh_completion(db, user)
            await db.commit()
        except Exception:
            await db.rollback()
            logger.warning("skills_replace_rolled_back", user_id=str(user_id))
            raise

        logger.info(
            "skills_replaced",
            user_id=str(user_id),
            offering=len(offering),
            seeking=len(seeking),
        )

    async def delete_skill(
        self,
        db: AsyncSession,
        user: User,
        skill_id: UUID,
    ) -> None:
        """
        Delete one of the user's skills.

        Raises:
            SkillNotFoundException: If the skill does not exist or belongs to someone else.
        """
        skill = await self.skill_repo.get_owned(db, user.id, skill_id)
        if not skill:
            raise SkillNotFoundException()

        await self.skill_repo.delete(db, skill.id)
        await self.profile_service.refresh_completion(db, user)
        await db.commit()
        logger.info("skill_deleted", user_id=str(user.id), skill_id=str(skill_id))

    def _to_response(self, skill: Skill) -> SkillResponse:
        return SkillResponse(
            id=skill.id,
            name=skill.name,
            category=skill.category,
            type=skill.type,
            proficiency_level=skill.proficiency_level,
            description=skill.description,
            created_at=skill.created_at,
        )
