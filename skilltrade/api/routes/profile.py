"""
Profile routes.

Thin controllers - all business logic lives in ProfileService.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.auth import ChangePasswordRequest
from skilltrade.schemas.base import MessageResponse
from skilltrade.schemas.user import ProfileUpdate, UserProfileResponse
from skilltrade.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

profile_service = ProfileService()


@router.get("", response_model=UserProfileResponse)
async def get_profile(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get current user's profile with skill count."""
    return await profile_service.get_profile(db, current_user)


@router.put("", response_model=UserProfileResponse)
async def update_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update the fields present in the body; profile completion is recomputed."""
    return await profile_service.update_profile(
        db,
        current_user,
        payload.model_dump(exclude_unset=True),
    )


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Change current user's password."""
    await profile_service.change_password(
        db,
        current_user,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Password changed successfully")


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Soft-delete current user's account."""
    await profile_service.deactivate_account(db, current_user)
    return MessageResponse(message="Account deleted successfully")
