"""
Message model - a direct message between two users.
"""
import uuid
from sqlalchemy import Boolean, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from skilltrade.models.base import BaseModel


class Message(BaseModel):
    """Directed, timestamped message. is_read flips when the receiver opens the thread."""

    __tablename__ = "messages"

    __table_args__ = (
        Index("ix_messages_pair", "sender_id", "receiver_id"),
    )

    sender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    receiver_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    def __repr__(self) -> str:
        return f"<Message {self.sender_id} -> {self.receiver_id}>"
