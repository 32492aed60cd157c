"""
Exchange service - scheduling and settling teaching sessions.

The user who creates an exchange is the teacher. Only the student can
confirm completion, which pays the teacher from the student's balance.
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.exceptions import (
    BadRequestException,
    ConflictException,
    ExchangeNotFoundException,
    ForbiddenException,
    NotMatchedException,
    UserNotFoundException,
)
from skilltrade.core.logging import get_logger
from skilltrade.models.exchange import (
    Exchange,
    EXCHANGE_CANCELLED,
    EXCHANGE_COMPLETED,
    EXCHANGE_SCHEDULED,
)
from skilltrade.models.user import User
from skilltrade.repositories.exchange_repository import ExchangeRepository
from skilltrade.repositories.match_repository import MatchRepository
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.exchange import ExchangeListResponse, ExchangeResponse
from skilltrade.services.time_credit_service import TimeCreditService

logger = get_logger(__name__)


class ExchangeService:
    """Handles the exchange lifecycle: scheduled -> completed | cancelled."""

    def __init__(self):
        self.exchange_repo = ExchangeRepository()
        self.match_repo = MatchRepository()
        self.user_repo = UserRepository()
        self.credit_service = TimeCreditService()

    async def create_exchange(
        self,
        db: AsyncSession,
        teacher: User,
        *,
        student_id: UUID,
        skill_offered: str,
        skill_requested: str,
        duration_minutes: int = 60,
        credits_amount: int = 1,
        scheduled_at: Optional[datetime] = None,
    ) -> ExchangeResponse:
        """
        Schedule a session where `teacher` teaches `student_id`.

        Raises:
            BadRequestException: If the teacher names themselves as student.
            UserNotFoundException: If the student is unknown or disabled.
            NotMatchedException: If the two users hold no accepted match.
        """
        if student_id == teacher.id:
            raise BadRequestException("Cannot schedule an exchange with yourself")

        student = await self.user_repo.get_active_by_id(db, student_id)
        if not student:
            raise UserNotFoundException("Student not found")

        match = await self.match_repo.get_accepted_between(db, teacher.id, student.id)
        if not match:
            raise NotMatchedException("Exchanges can only be scheduled with matched users")

        exchange = await self.exchange_repo.create(
            db,
            match_id=match.id,
            teacher_id=teacher.id,
            student_id=student.id,
            skill_offered=skill_offered,
            skill_requested=skill_requested,
            duration_minutes=duration_minutes,
            credits_amount=credits_amount,
            scheduled_at=scheduled_at,
            status=EXCHANGE_SCHEDULED,
        )
        await db.commit()

        logger.info(
            "exchange_scheduled",
            exchange_id=str(exchange.id),
            teacher_id=str(teacher.id),
            student_id=str(student.id),
        )
        return self._to_response(exchange, teacher.id)

    async def list_exchanges(
        self,
        db: AsyncSession,
        user: User,
        *,
        status: Optional[str] = None,
    ) -> ExchangeListResponse:
        exchanges = await self.exchange_repo.list_for_user(db, user.id, status=status)
        return ExchangeListResponse(
            exchanges=[self._to_response(e, user.id) for e in exchanges]
        )

    async def complete_exchange(
        self,
        db: AsyncSession,
        user: User,
        exchange_id: UUID,
    ) -> ExchangeResponse:
        """
        Student confirms the session happened; credits move to the teacher.

        The status change and both ledger rows commit together or not at all.

        Raises:
            ExchangeNotFoundException: If the user takes no part in the exchange.
            ForbiddenException: If the caller is not the student.
            ConflictException: If the exchange is no longer scheduled.
            InsufficientCreditsException: If the student cannot pay.
        """
        user_id = user.id
        exchange = await self.exchange_repo.get_for_participant(
            db, exchange_id, user_id, for_update=True
        )
        if not exchange:
            raise ExchangeNotFoundException()
        if exchange.student_id != user_id:
            raise ForbiddenException("Only the student can confirm completion")
        if exchange.status != EXCHANGE_SCHEDULED:
            raise ConflictException(f"Exchange is already {exchange.status}")

        try:
            await self.credit_service.transfer_for_exchange(db, exchange)
            exchange.status = EXCHANGE_COMPLETED
            exchange.completed_at = datetime.now(timezone.utc)
            await db.flush()
            await db.commit()
        except Exception:
            await db.rollback()
            logger.warning("exchange_completion_rolled_back", exchange_id=str(exchange_id))
            raise

        logger.info("exchange_completed", exchange_id=str(exchange_id))
        await db.refresh(exchange)
        return self._to_response(exchange, user_id)

    async def cancel_exchange(
        self,
        db: AsyncSession,
        user: User,
        exchange_id: UUID,
    ) -> ExchangeResponse:
        """Either participant may cancel while the exchange is still scheduled."""
        exchange = await self.exchange_repo.get_for_participant(
            db, exchange_id, user.id, for_update=True
        )
        if not exchange:
            raise ExchangeNotFoundException()
        if exchange.status != EXCHANGE_SCHEDULED:
            raise ConflictException(f"Exchange is already {exchange.status}")

        exchange = await self.exchange_repo.update(db, exchange, status=EXCHANGE_CANCELLED)
        await db.commit()

        logger.info("exchange_cancelled", exchange_id=str(exchange.id), by=str(user.id))
        return self._to_response(exchange, user.id)

    async def rate_exchange(
        self,
        db: AsyncSession,
        user: User,
        exchange_id: UUID,
        *,
        rating: int,
        feedback: Optional[str] = None,
    ) -> ExchangeResponse:
        """
        The student rates a completed session, once.

        Raises:
            ExchangeNotFoundException: If the user takes no part in the exchange.
            ForbiddenException: If the caller is not the student.
            ConflictException: If not completed yet or already rated.
        """
        exchange = await self.exchange_repo.get_for_participant(db, exchange_id, user.id)
        if not exchange:
            raise ExchangeNotFoundException()
        if exchange.student_id != user.id:
            raise ForbiddenException("Only the student can rate an exchange")
        if exchange.status != EXCHANGE_COMPLETED:
            raise ConflictException("Only completed exchanges can be rated")
        if exchange.rating is not None:
            raise ConflictException("Exchange has already been rated")

        exchange = await self.exchange_repo.update(
            db, exchange, rating=rating, feedback=feedback
        )
        await db.commit()
        return self._to_response(exchange, user.id)

    def _to_response(self, exchange: Exchange, user_id: UUID) -> ExchangeResponse:
        return ExchangeResponse(
            id=exchange.id,
            match_id=exchange.match_id,
            teacher_id=exchange.teacher_id,
            student_id=exchange.student_id,
            role="teacher" if exchange.teacher_id == user_id else "student",
            skill_offered=exchange.skill_offered,
            skill_requested=exchange.skill_requested,
            duration_minutes=exchange.duration_minutes,
            credits_amount=exchange.credits_amount,
            status=exchange.status,
            scheduled_at=exchange.scheduled_at,
            completed_at=exchange.completed_at,
            rating=exchange.rating,
            feedback=exchange.feedback,
            created_at=exchange.created_at,
            updated_at=exchange.updated_at,
        )
