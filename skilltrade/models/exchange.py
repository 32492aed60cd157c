"""
Exchange model - a teaching session scheduled between matched users.
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skilltrade.models.base import BaseModel

if TYPE_CHECKING:
    from skilltrade.models.user import User
    from skilltrade.models.match import Match


EXCHANGE_SCHEDULED = "scheduled"
EXCHANGE_COMPLETED = "completed"
EXCHANGE_CANCELLED = "cancelled"


class Exchange(BaseModel):
    """
    Exchange entity.

    Lifecycle: scheduled -> completed | cancelled.
    Completion moves credits_amount from the student to the teacher.
    """

    __tablename__ = "exchanges"

    __table_args__ = (
        CheckConstraint(
            "status IN ('scheduled', 'completed', 'cancelled')",
            name="ck_exchanges_status",
        ),
        CheckConstraint("rating IS NULL OR rating BETWEEN 1 AND 5", name="ck_exchanges_rating"),
        CheckConstraint("credits_amount > 0", name="ck_exchanges_credits_amount"),
    )

    match_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("matches.id", ondelete="SET NULL"),
        nullable=True,
    )
    teacher_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    skill_offered: Mapped[str] = mapped_column(String(255), nullable=False)
    skill_requested: Mapped[str] = mapped_column(String(255), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, default=60, nullable=False)
    credits_amount: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        default=EXCHANGE_SCHEDULED,
        nullable=False,
        index=True,
    )
    scheduled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Student feedback
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    feedback: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    teacher: Mapped["User"] = relationship("User", foreign_keys=[teacher_id])
    student: Mapped["User"] = relationship("User", foreign_keys=[student_id])
    match: Mapped[Optional["Match"]] = relationship("Match")

    def __repr__(self) -> str:
        return f"<Exchange {self.skill_offered} {self.teacher_id} -> {self.student_id} {self.status}>"
