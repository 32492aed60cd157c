"""
Time credit routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.time_credit import TimeCreditsResponse
from skilltrade.services.time_credit_service import TimeCreditService

router = APIRouter(prefix="/time-credits", tags=["time-credits"])

credit_service = TimeCreditService()


@router.get("", response_model=TimeCreditsResponse)
async def get_time_credits(
    limit: int = Query(20, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Current balance and ledger history, newest first."""
    return await credit_service.get_credits(db, current_user, limit=limit, offset=offset)
