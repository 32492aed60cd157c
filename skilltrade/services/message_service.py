"""
Message service - direct messaging between matched users.
"""
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.exceptions import (
    BadRequestException,
    NotMatchedException,
    UserNotFoundException,
)
from skilltrade.core.logging import get_logger
from skilltrade.models.user import User
from skilltrade.repositories.match_repository import MatchRepository
from skilltrade.repositories.message_repository import MessageRepository
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.base import Pagination
from skilltrade.schemas.message import (
    ChatMessageResponse,
    Conversation,
    ConversationPartner,
    ConversationsResponse,
    LastMessage,
    ThreadMessage,
    ThreadResponse,
)
from skilltrade.schemas.user import CHAT_AVATAR
from skilltrade.services.profile_service import is_online

logger = get_logger(__name__)


class MessageService:
    """Handles conversations, threads, and sending."""

    def __init__(self):
        self.message_repo = MessageRepository()
        self.match_repo = MatchRepository()
        self.user_repo = UserRepository()

    async def list_conversations(
        self,
        db: AsyncSession,
        user: User,
    ) -> ConversationsResponse:
        summaries = await self.message_repo.list_conversations(db, user.id)
        partners = {
            p.id: p
            for p in await self.user_repo.get_many_by_ids(
                db, [s.other_user_id for s in summaries]
            )
        }

        conversations = []
        for summary in summaries:
            partner = partners.get(summary.other_user_id)
            if partner is None:
                continue
            conversations.append(
                Conversation(
                    id=partner.id,
                    user=ConversationPartner(
                        id=partner.id,
                        name=partner.name,
                        avatar=partner.avatar_url or CHAT_AVATAR,
                        status="online" if is_online(partner.last_active) else "offline",
                    ),
                    last_message=LastMessage(
                        text=summary.last_message_text,
                        time=summary.last_message_at,
                        is_read=summary.unread_count == 0,
                    ),
                    unread_count=summary.unread_count,
                )
            )

        return ConversationsResponse(conversations=conversations)

    async def get_thread(
        self,
        db: AsyncSession,
        user: User,
        other_user_id: UUID,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> ThreadResponse:
        """
        A page of the thread in chronological order.

        Message status reflects the state before this call; the partner's
        unread messages are marked read afterwards.
        """
        page = await self.message_repo.get_thread(
            db, user.id, other_user_id, limit=limit, offset=offset
        )
        messages = [
            ThreadMessage(
                id=m.id,
                text=m.content,
                sender="me" if m.sender_id == user.id else "them",
                status="read" if m.is_read else "delivered",
                created_at=m.created_at,
            )
            for m in reversed(page)
        ]

        marked = await self.message_repo.mark_read(
            db, sender_id=other_user_id, receiver_id=user.id
        )
        await db.commit()
        if marked:
            logger.debug("messages_marked_read", user_id=str(user.id), count=marked)

        return ThreadResponse(
            messages=messages,
            pagination=Pagination(
                limit=limit,
                offset=offset,
                has_more=len(page) == limit,
            ),
        )

    async def send_message(
        self,
        db: AsyncSession,
        user: User,
        *,
        receiver_id: UUID,
        content: str,
    ) -> ChatMessageResponse:
        """
        Send a message to a matched user.

        Raises:
            BadRequestException: If the user messages themselves.
            UserNotFoundException: If the receiver is unknown or disabled.
            NotMatchedException: If the two users hold no accepted match.
        """
        if receiver_id == user.id:
            raise BadRequestException("Cannot message yourself", code="SELF_MESSAGE")

        receiver = await self.user_repo.get_active_by_id(db, receiver_id)
        if not receiver:
            raise UserNotFoundException("Receiver not found")

        if not await self.match_repo.get_accepted_between(db, user.id, receiver.id):
            raise NotMatchedException("You can only message users you have matched with")

        message = await self.message_repo.create(
            db,
            sender_id=user.id,
            receiver_id=receiver.id,
            content=content,
        )
        await db.commit()

        logger.info("message_sent", sender_id=str(user.id), receiver_id=str(receiver.id))
        return ChatMessageResponse.model_validate(message)
