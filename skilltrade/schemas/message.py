"""
Messaging schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID
from pydantic import Field
from skilltrade.schemas.base import BaseSchema, Pagination


class SendMessageRequest(BaseSchema):
    receiver_id: UUID
    content: str = Field(..., min_length=1, max_length=1000)


class ChatMessageResponse(BaseSchema):
    """A stored message as returned after sending."""

    id: UUID
    sender_id: UUID
    receiver_id: UUID
    content: str
    is_read: bool
    created_at: datetime


class ThreadMessage(BaseSchema):
    """One message inside a thread, seen from the requesting user."""

    id: UUID
    text: str
    sender: Literal["me", "them"]
    status: Literal["read", "delivered"]
    created_at: datetime


class ThreadResponse(BaseSchema):
    messages: List[ThreadMessage]
    pagination: Pagination


class ConversationPartner(BaseSchema):
    id: UUID
    name: str
    avatar: str
    status: Literal["online", "offline"]


class LastMessage(BaseSchema):
    text: Optional[str] = None
    time: Optional[datetime] = None
    is_read: bool


class Conversation(BaseSchema):
    id: UUID
    user: ConversationPartner
    last_message: LastMessage
    unread_count: int


class ConversationsResponse(BaseSchema):
    conversations: List[Conversation]
