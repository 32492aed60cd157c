"""
Messaging routes.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.database import get_db
from skilltrade.core.rate_limit import limiter, RATE_MESSAGES
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.message import (
    ChatMessageResponse,
    ConversationsResponse,
    SendMessageRequest,
    ThreadResponse,
)
from skilltrade.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])

message_service = MessageService()


@router.get("", response_model=ConversationsResponse)
async def list_conversations(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Conversation list, most recent first."""
    return await message_service.list_conversations(db, current_user)


@router.get("/{user_id}", response_model=ThreadResponse)
async def get_thread(
    user_id: UUID,
    limit: int = Query(50, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Thread with another user in chronological order.

    The other user's messages are marked read by this call.
    """
    return await message_service.get_thread(
        db, current_user, user_id, limit=limit, offset=offset
    )


@router.post("", response_model=ChatMessageResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_MESSAGES)
async def send_message(
    request: Request,
    payload: SendMessageRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Send a message to a matched user."""
    return await message_service.send_message(
        db,
        current_user,
        receiver_id=payload.receiver_id,
        content=payload.content,
    )
