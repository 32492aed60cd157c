"""
Skill routes.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.base import MessageResponse
from skilltrade.schemas.skill import (
    BulkSkillsUpdate,
    SkillCreate,
    SkillResponse,
    SkillsByType,
)
from skilltrade.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

skill_service = SkillService()


@router.get("", response_model=SkillsByType)
async def list_skills(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Current user's skills split into offering and seeking."""
    return await skill_service.list_skills(db, current_user)


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def add_skill(
    payload: SkillCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await skill_service.add_skill(
        db,
        current_user,
        name=payload.name,
        type=payload.type,
        category=payload.category,
        proficiency_level=payload.proficiency_level,
        description=payload.description,
    )


@router.put("", response_model=MessageResponse)
async def replace_skills(
    payload: BulkSkillsUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Replace all of the user's skills in one go."""
    await skill_service.replace_skills(
        db,
        current_user,
        offering=payload.offering,
        seeking=payload.seeking,
    )
    return MessageResponse(message="Skills updated successfully")


@router.delete("/{skill_id}", response_model=MessageResponse)
async def delete_skill(
    skill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await skill_service.delete_skill(db, current_user, skill_id)
    return MessageResponse(message="Skill deleted successfully")
