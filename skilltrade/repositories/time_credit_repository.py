"""
Time credit repository - data access for the credit ledger.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from skilltrade.models.time_credit import TimeCreditTransaction
from skilltrade.repositories.base import BaseRepository


class TimeCreditRepository(BaseRepository[TimeCreditTransaction]):
    def __init__(self):
        super().__init__(TimeCreditTransaction)

    async def get_history(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> List[TimeCreditTransaction]:
        """Ledger entries newest first, with their exchange loaded."""
        result = await db.execute(
            select(TimeCreditTransaction)
            .options(selectinload(TimeCreditTransaction.exchange))
            .where(TimeCreditTransaction.user_id == user_id)
            .order_by(TimeCreditTransaction.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def sum_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        """Sum of all ledger amounts; equals the stored balance."""
        result = await db.execute(
            select(func.coalesce(func.sum(TimeCreditTransaction.amount), 0)).where(
                TimeCreditTransaction.user_id == user_id
            )
        )
        return int(result.scalar() or 0)
