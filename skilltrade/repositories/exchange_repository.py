"""
Exchange repository - data access for teaching sessions.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.models.exchange import Exchange
from skilltrade.repositories.base import BaseRepository


class ExchangeRepository(BaseRepository[Exchange]):
    def __init__(self):
        super().__init__(Exchange)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        status: Optional[str] = None,
    ) -> List[Exchange]:
        """Exchanges where the user teaches or learns, newest first."""
        query = select(Exchange).where(
            or_(Exchange.teacher_id == user_id, Exchange.student_id == user_id)
        )
        if status:
            query = query.where(Exchange.status == status)

        result = await db.execute(query.order_by(Exchange.created_at.desc()))
        return list(result.scalars().all())

    async def get_for_participant(
        self,
        db: AsyncSession,
        exchange_id: UUID,
        user_id: UUID,
        *,
        for_update: bool = False,
    ) -> Optional[Exchange]:
        """Get an exchange only if user_id takes part in it."""
        query = select(Exchange).where(
            Exchange.id == exchange_id,
            or_(Exchange.teacher_id == user_id, Exchange.student_id == user_id),
        )
        if for_update:
            query = query.with_for_update()

        result = await db.execute(query)
        return result.scalar_one_or_none()
