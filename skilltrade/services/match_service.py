"""
Match service - swiping and mutual matches.

A like is stored as a pending row from the liker to the target. When the
target likes back, that existing row flips to accepted; no second row is
written. Passes are stored as rejected rows so the candidate does not
come back.
"""
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.exceptions import BadRequestException, UserNotFoundException
from skilltrade.core.logging import get_logger
from skilltrade.models.match import Match, MATCH_ACCEPTED, MATCH_PENDING, MATCH_REJECTED
from skilltrade.models.skill import SKILL_OFFERING, SKILL_SEEKING
from skilltrade.models.user import User
from skilltrade.repositories.match_repository import MatchRepository
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.match import (
    MatchCandidate,
    MatchCandidatesResponse,
    MutualMatch,
    MutualMatchesResponse,
    SwipeResponse,
)
from skilltrade.schemas.user import DEFAULT_AVATAR
from skilltrade.services.profile_service import user_card

logger = get_logger(__name__)

MAX_TAGS = 3


class MatchService:
    """Handles candidate discovery, swipes, and mutual match listing."""

    def __init__(self):
        self.match_repo = MatchRepository()
        self.user_repo = UserRepository()

    async def get_candidates(
        self,
        db: AsyncSession,
        user: User,
        *,
        limit: int = 10,
    ) -> MatchCandidatesResponse:
        candidates = await self.match_repo.find_candidates(db, user.id, limit=limit)
        return MatchCandidatesResponse(
            matches=[self._to_candidate(c) for c in candidates]
        )

    async def swipe(
        self,
        db: AsyncSession,
        user: User,
        *,
        target_user_id: UUID,
        action: str,
    ) -> SwipeResponse:
        """
        Record a like or a pass.

        If a concurrent swipe on the same pair inserts its row first, the
        unique pair constraint fires; the transaction is rolled back and the
        swipe is applied once more against the row that now exists.

        Raises:
            BadRequestException: If the user swipes on themselves.
            UserNotFoundException: If the target is unknown or disabled.
        """
        user_id = user.id
        if target_user_id == user_id:
            raise BadRequestException("Cannot match with yourself", code="SELF_MATCH")

        target = await self.user_repo.get_active_by_id(db, target_user_id)
        if not target:
            raise UserNotFoundException("Target user not found")
        target_id = target.id

        try:
            return await self._apply_swipe(db, user_id, target_id, action)
        except IntegrityError:
            await db.rollback()
            logger.info("swipe_retried", user_id=str(user_id), target_id=str(target_id))
            return await self._apply_swipe(db, user_id, target_id, action)

    async def _apply_swipe(
        self,
        db: AsyncSession,
        user_id: UUID,
        target_id: UUID,
        action: str,
    ) -> SwipeResponse:
        if await self.match_repo.get_accepted_between(db, user_id, target_id):
            return SwipeResponse(is_match=True, message="Already matched")

        own = await self.match_repo.get_directed(db, user_id, target_id)

        if action == "pass":
            await self._set_own(db, own, user_id, target_id, MATCH_REJECTED)
            await db.commit()
            logger.info("swipe_pass", user_id=str(user_id), target_id=str(target_id))
            return SwipeResponse(is_match=False, message="Pass recorded")

        reverse = await self.match_repo.get_directed(db, target_id, user_id)
        if reverse and reverse.status == MATCH_PENDING:
            reverse.status = MATCH_ACCEPTED
            await db.commit()
            logger.info("match_accepted", match_id=str(reverse.id))
            return SwipeResponse(is_match=True, message="It's a match!")

        await self._set_own(db, own, user_id, target_id, MATCH_PENDING)
        await db.commit()
        logger.info("swipe_like", user_id=str(user_id), target_id=str(target_id))
        return SwipeResponse(is_match=False, message="Like recorded")

    async def list_mutual(
        self,
        db: AsyncSession,
        user: User,
    ) -> MutualMatchesResponse:
        matches = await self.match_repo.list_accepted(db, user.id)
        items = []
        for match in matches:
            partner = match.user2 if match.user1_id == user.id else match.user1
            if not partner.is_active:
                continue
            items.append(
                MutualMatch(
                    match_id=match.id,
                    user=user_card(partner),
                    matched_at=match.updated_at,
                )
            )
        return MutualMatchesResponse(matches=items)

    async def _set_own(
        self,
        db: AsyncSession,
        own: Match,
        user_id: UUID,
        target_id: UUID,
        status: str,
    ) -> None:
        if own:
            own.status = status
            await db.flush()
        else:
            await self.match_repo.create(
                db,
                user1_id=user_id,
                user2_id=target_id,
                status=status,
            )

    def _to_candidate(self, candidate: User) -> MatchCandidate:
        offering = [s.name for s in candidate.skills if s.type == SKILL_OFFERING]
        seeking = [s.name for s in candidate.skills if s.type == SKILL_SEEKING]
        bio = candidate.bio if candidate.bio and candidate.bio.strip() else (
            f"Hi! I'm {candidate.first_name}, excited to share my skills."
        )
        return MatchCandidate(
            id=candidate.id,
            name=candidate.name,
            avatar=candidate.avatar_url or DEFAULT_AVATAR,
            bio=bio,
            location=candidate.location,
            occupation=candidate.occupation,
            offering=offering,
            seeking=seeking,
            tags=offering[:MAX_TAGS],
        )
