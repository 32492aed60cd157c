"""
Match routes - candidates, swipes and mutual matches.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.match import (
    MatchCandidatesResponse,
    MutualMatchesResponse,
    SwipeRequest,
    SwipeResponse,
)
from skilltrade.services.match_service import MatchService

router = APIRouter(prefix="/matches", tags=["matches"])

match_service = MatchService()


@router.get("", response_model=MatchCandidatesResponse)
async def get_candidates(
    limit: int = Query(10, ge=1, le=settings.max_page_size),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Users offering something the current user is seeking.

    Already swiped and already matched users are left out.
    """
    return await match_service.get_candidates(db, current_user, limit=limit)


@router.post("", response_model=SwipeResponse)
async def swipe(
    payload: SwipeRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Like or pass on a candidate."""
    return await match_service.swipe(
        db,
        current_user,
        target_user_id=payload.target_user_id,
        action=payload.action,
    )


@router.get("/mutual", response_model=MutualMatchesResponse)
async def list_mutual(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await match_service.list_mutual(db, current_user)
