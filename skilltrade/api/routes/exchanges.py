"""
Exchange routes - scheduled teaching sessions.
"""
from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.exchange import (
    ExchangeCreate,
    ExchangeListResponse,
    ExchangeRateRequest,
    ExchangeResponse,
)
from skilltrade.services.exchange_service import ExchangeService

router = APIRouter(prefix="/exchanges", tags=["exchanges"])

exchange_service = ExchangeService()


@router.post("", response_model=ExchangeResponse, status_code=status.HTTP_201_CREATED)
async def create_exchange(
    payload: ExchangeCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Schedule a session. The caller teaches, `student_id` learns."""
    return await exchange_service.create_exchange(
        db,
        current_user,
        student_id=payload.student_id,
        skill_offered=payload.skill_offered,
        skill_requested=payload.skill_requested,
        duration_minutes=payload.duration_minutes,
        credits_amount=payload.credits_amount,
        scheduled_at=payload.scheduled_at,
    )


@router.get("", response_model=ExchangeListResponse)
async def list_exchanges(
    status_filter: Optional[Literal["scheduled", "completed", "cancelled"]] = Query(None, alias="status"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await exchange_service.list_exchanges(db, current_user, status=status_filter)


@router.post("/{exchange_id}/complete", response_model=ExchangeResponse)
async def complete_exchange(
    exchange_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Student confirms the session; credits move to the teacher."""
    return await exchange_service.complete_exchange(db, current_user, exchange_id)


@router.post("/{exchange_id}/cancel", response_model=ExchangeResponse)
async def cancel_exchange(
    exchange_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await exchange_service.cancel_exchange(db, current_user, exchange_id)


@router.post("/{exchange_id}/rate", response_model=ExchangeResponse)
async def rate_exchange(
    exchange_id: UUID,
    payload: ExchangeRateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Student rates a completed session."""
    return await exchange_service.rate_exchange(
        db,
        current_user,
        exchange_id,
        rating=payload.rating,
        feedback=payload.feedback,
    )
