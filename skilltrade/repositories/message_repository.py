"""
Message repository - data access for direct messages.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy import select, update, func, case, literal, union_all, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.models.message import Message
from skilltrade.repositories.base import BaseRepository


@dataclass
class ConversationSummary:
    """Aggregate row for one conversation partner."""

    other_user_id: UUID
    last_message_at: datetime
    unread_count: int
    last_message_text: str


def _between(user_a: UUID, user_b: UUID):
    return or_(
        and_(Message.sender_id == user_a, Message.receiver_id == user_b),
        and_(Message.sender_id == user_b, Message.receiver_id == user_a),
    )


class MessageRepository(BaseRepository[Message]):
    def __init__(self):
        super().__init__(Message)

    async def get_thread(
        self,
        db: AsyncSession,
        user_a: UUID,
        user_b: UUID,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Message]:
        """A page of the thread, newest first."""
        result = await db.execute(
            select(Message)
            .where(_between(user_a, user_b))
            .order_by(Message.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def mark_read(
        self,
        db: AsyncSession,
        *,
        sender_id: UUID,
        receiver_id: UUID,
    ) -> int:
        """Mark everything sender_id sent to receiver_id as read."""
        result = await db.execute(
            update(Message)
            .where(
                Message.sender_id == sender_id,
                Message.receiver_id == receiver_id,
                Message.is_read == False,
            )
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_conversations(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[ConversationSummary]:
        """
        One summary per conversation partner, most recent activity first.

        Totals and the latest message per partner come back in one query.
        """
        sent = select(
            Message.receiver_id.label("other_user_id"),
            Message.created_at.label("created_at"),
            literal(0).label("unread"),
        ).where(Message.sender_id == user_id)
        received = select(
            Message.sender_id.label("other_user_id"),
            Message.created_at.label("created_at"),
            case((Message.is_read == False, 1), else_=0).label("unread"),
        ).where(Message.receiver_id == user_id)
        involved = union_all(sent, received).subquery()

        totals = (
            select(
                involved.c.other_user_id,
                func.max(involved.c.created_at).label("last_message_at"),
                func.sum(involved.c.unread).label("unread_count"),
            )
            .group_by(involved.c.other_user_id)
            .subquery()
        )

        partner = case(
            (Message.sender_id == user_id, Message.receiver_id),
            else_=Message.sender_id,
        )
        ranked = (
            select(
                partner.label("other_user_id"),
                Message.content.label("content"),
                func.row_number()
                .over(
                    partition_by=partner,
                    order_by=(Message.created_at.desc(), Message.id.desc()),
                )
                .label("rn"),
            )
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .subquery()
        )

        result = await db.execute(
            select(
                totals.c.other_user_id,
                totals.c.last_message_at,
                totals.c.unread_count,
                ranked.c.content,
            )
            .join(
                ranked,
                and_(
                    ranked.c.other_user_id == totals.c.other_user_id,
                    ranked.c.rn == 1,
                ),
            )
            .order_by(totals.c.last_message_at.desc())
        )
        return [
            ConversationSummary(
                other_user_id=row.other_user_id,
                last_message_at=row.last_message_at,
                unread_count=int(row.unread_count or 0),
                last_message_text=row.content,
            )
            for row in result.all()
        ]
