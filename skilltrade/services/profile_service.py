"""
Profile service - business logic for the user's own profile.

Also owns profile completion, which other services recompute after
they change anything that feeds into it.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.exceptions import BadRequestException
from skilltrade.core.logging import get_logger
from skilltrade.core.security import hash_password, verify_password
from skilltrade.models.user import User
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.user import (
    DEFAULT_AVATAR,
    UserCard,
    UserProfileResponse,
    UserResponse,
)

logger = get_logger(__name__)

# Weight of each filled profile element. Sums to 100.
COMPLETION_WEIGHTS = {
    "first_name": 20,
    "last_name": 20,
    "bio": 20,
    "location": 10,
    "occupation": 10,
}
COMPLETION_SKILLS_WEIGHT = 20


def compute_profile_completion(user: User, skills_count: int) -> int:
    """Percentage of the profile that is filled in. Blank strings count as missing."""
    score = 0
    for field_name, weight in COMPLETION_WEIGHTS.items():
        value = getattr(user, field_name)
        if value and value.strip():
            score += weight
    if skills_count > 0:
        score += COMPLETION_SKILLS_WEIGHT
    return score


def is_online(last_active: Optional[datetime], now: Optional[datetime] = None) -> bool:
    if last_active is None:
        return False
    if last_active.tzinfo is None:
        last_active = last_active.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return last_active > now - timedelta(minutes=settings.online_window_minutes)


def user_card(user: User, default_avatar: str = DEFAULT_AVATAR) -> UserCard:
    """Public card of a user as shown to others."""
    return UserCard(
        id=user.id,
        name=user.name,
        avatar=user.avatar_url or default_avatar,
        location=user.location,
        occupation=user.occupation,
    )


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        name=user.name,
        avatar_url=user.avatar_url,
        bio=user.bio,
        location=user.location,
        occupation=user.occupation,
        website=user.website,
        time_credits=user.time_credits,
        profile_completion=user.profile_completion,
        is_verified=user.is_verified,
        is_active=user.is_active,
        created_at=user.created_at,
        last_active=user.last_active,
    )


class ProfileService:
    """Handles profile reads and writes for the current user."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def refresh_completion(
        self,
        db: AsyncSession,
        user: User,
    ) -> int:
        """Recompute and store profile_completion. Caller commits."""
        skills_count = await self.user_repo.count_skills(db, user.id)
        user.profile_completion = compute_profile_completion(user, skills_count)
        await db.flush()
        return user.profile_completion

    async def get_profile(
        self,
        db: AsyncSession,
        user: User,
    ) -> UserProfileResponse:
        skills_count = await self.user_repo.count_skills(db, user.id)
        return UserProfileResponse(
            **to_user_response(user).model_dump(),
            skills_count=skills_count,
        )

    async def update_profile(
        self,
        db: AsyncSession,
        user: User,
        updates: dict[str, Any],
    ) -> UserProfileResponse:
        """
        Apply the provided fields only.

        `updates` should already exclude fields the client did not send.
        """
        # Names are required columns; an explicit null leaves them unchanged.
        for required in ("first_name", "last_name"):
            if required in updates and updates[required] is None:
                del updates[required]
        if "website" in updates and updates["website"] is not None:
            updates["website"] = str(updates["website"])

        if updates:
            user = await self.user_repo.update(db, user, **updates)
            await self.refresh_completion(db, user)
            await db.commit()
            logger.info("profile_updated", user_id=str(user.id), fields=sorted(updates))

        return await self.get_profile(db, user)

    async def change_password(
        self,
        db: AsyncSession,
        user: User,
        *,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Change user's password.

        Raises:
            BadRequestException: If current password is wrong.
        """
        if not verify_password(current_password, user.password_hash):
            raise BadRequestException("Current password is incorrect")

        await self.user_repo.update(db, user, password_hash=hash_password(new_password))
        await db.commit()
        logger.info("password_changed", user_id=str(user.id))

    async def deactivate_account(
        self,
        db: AsyncSession,
        user: User,
    ) -> None:
        """Soft-disable the account. Rows stay for the partners' history."""
        await self.user_repo.update(db, user, is_active=False)
        await db.commit()
        logger.info("account_deactivated", user_id=str(user.id))
