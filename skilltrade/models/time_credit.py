"""
TimeCreditTransaction model - the time credit ledger.
"""
import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, Text, Integer, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skilltrade.models.base import BaseModel

if TYPE_CHECKING:
    from skilltrade.models.exchange import Exchange


CREDIT_EARNED = "earned"
CREDIT_SPENT = "spent"
CREDIT_BONUS = "bonus"


class TimeCreditTransaction(BaseModel):
    """
    One ledger entry. Positive amounts add to the balance, negative ones
    (type 'spent') subtract from it.
    """

    __tablename__ = "time_credits"

    __table_args__ = (
        CheckConstraint("type IN ('earned', 'spent', 'bonus')", name="ck_time_credits_type"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    exchange_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("exchanges.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    exchange: Mapped[Optional["Exchange"]] = relationship("Exchange")

    def __repr__(self) -> str:
        return f"<TimeCreditTransaction {self.type} {self.amount} user_id={self.user_id}>"
