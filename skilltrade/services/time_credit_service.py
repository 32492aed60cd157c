"""
Time credit service - the credit ledger.

Every balance change goes through here and writes a ledger row in the
same transaction, so users.time_credits always equals the ledger sum.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.exceptions import InsufficientCreditsException
from skilltrade.core.logging import get_logger
from skilltrade.models.exchange import Exchange
from skilltrade.models.time_credit import (
    TimeCreditTransaction,
    CREDIT_BONUS,
    CREDIT_EARNED,
    CREDIT_SPENT,
)
from skilltrade.models.user import User
from skilltrade.repositories.time_credit_repository import TimeCreditRepository
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.base import Pagination
from skilltrade.schemas.time_credit import (
    CreditTransactionResponse,
    ExchangeSummary,
    TimeCreditsResponse,
)

logger = get_logger(__name__)


class TimeCreditService:
    """Handles balance reads and ledger writes."""

    def __init__(self):
        self.credit_repo = TimeCreditRepository()
        self.user_repo = UserRepository()

    async def grant_bonus(
        self,
        db: AsyncSession,
        user: User,
        amount: int,
        description: str,
    ) -> TimeCreditTransaction:
        """Credit a bonus. Caller commits."""
        user.time_credits += amount
        entry = await self.credit_repo.create(
            db,
            user_id=user.id,
            amount=amount,
            type=CREDIT_BONUS,
            description=description,
        )
        logger.info("credits_bonus_granted", user_id=str(user.id), amount=amount)
        return entry

    async def transfer_for_exchange(
        self,
        db: AsyncSession,
        exchange: Exchange,
    ) -> None:
        """
        Move exchange.credits_amount from the student to the teacher.

        Both user rows are locked first. Caller owns the transaction and
        must commit (or roll back on error).

        Raises:
            InsufficientCreditsException: If the student cannot pay.
        """
        users = {
            u.id: u
            for u in await self.user_repo.lock_many(
                db, [exchange.teacher_id, exchange.student_id]
            )
        }
        teacher = users[exchange.teacher_id]
        student = users[exchange.student_id]
        amount = exchange.credits_amount

        if student.time_credits < amount:
            raise InsufficientCreditsException()

        student.time_credits -= amount
        teacher.time_credits += amount

        await self.credit_repo.create(
            db,
            user_id=student.id,
            amount=-amount,
            type=CREDIT_SPENT,
            description=f"Learned {exchange.skill_offered} from {teacher.name}",
            exchange_id=exchange.id,
        )
        await self.credit_repo.create(
            db,
            user_id=teacher.id,
            amount=amount,
            type=CREDIT_EARNED,
            description=f"Taught {exchange.skill_offered} to {student.name}",
            exchange_id=exchange.id,
        )
        logger.info(
            "credits_transferred",
            exchange_id=str(exchange.id),
            from_user=str(student.id),
            to_user=str(teacher.id),
            amount=amount,
        )

    async def get_credits(
        self,
        db: AsyncSession,
        user: User,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> TimeCreditsResponse:
        """Current balance plus a page of ledger history."""
        entries = await self.credit_repo.get_history(
            db, user.id, limit=limit, offset=offset
        )
        history = [self._to_response(entry, user.id) for entry in entries]

        return TimeCreditsResponse(
            current_balance=user.time_credits,
            history=history,
            pagination=Pagination(
                limit=limit,
                offset=offset,
                has_more=len(history) == limit,
            ),
        )

    def _to_response(
        self,
        entry: TimeCreditTransaction,
        user_id: UUID,
    ) -> CreditTransactionResponse:
        exchange: Optional[ExchangeSummary] = None
        if entry.exchange is not None:
            exchange = ExchangeSummary(
                skill_offered=entry.exchange.skill_offered,
                skill_requested=entry.exchange.skill_requested,
                role="taught" if entry.exchange.teacher_id == user_id else "learned",
            )

        return CreditTransactionResponse(
            id=entry.id,
            amount=entry.amount,
            type=entry.type,
            description=entry.description,
            created_at=entry.created_at,
            exchange=exchange,
        )
