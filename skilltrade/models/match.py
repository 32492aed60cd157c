"""
Match model - a directed swipe from one user to another.
"""
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import String, ForeignKey, UniqueConstraint, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skilltrade.models.base import BaseModel

if TYPE_CHECKING:
    from skilltrade.models.user import User


MATCH_PENDING = "pending"
MATCH_ACCEPTED = "accepted"
MATCH_REJECTED = "rejected"


class Match(BaseModel):
    """
    Match entity.

    user1 is the user who swiped, user2 the one swiped on.
    - like  -> pending
    - pass  -> rejected
    - a like answering a pending like flips that row to accepted
    """

    __tablename__ = "matches"

    # One swipe record per direction
    __table_args__ = (
        UniqueConstraint("user1_id", "user2_id", name="uq_match_pair"),
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_matches_status",
        ),
    )

    user1_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user2_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=MATCH_PENDING,
        nullable=False,
        index=True,
    )

    # Relationships
    user1: Mapped["User"] = relationship("User", foreign_keys=[user1_id])
    user2: Mapped["User"] = relationship("User", foreign_keys=[user2_id])

    def __repr__(self) -> str:
        return f"<Match {self.user1_id} -> {self.user2_id} {self.status}>"
