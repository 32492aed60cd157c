"""
Time credit ledger schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID
from skilltrade.schemas.base import BaseSchema, Pagination


class ExchangeSummary(BaseSchema):
    skill_offered: str
    skill_requested: str
    role: Literal["taught", "learned"]


class CreditTransactionResponse(BaseSchema):
    id: UUID
    amount: int
    type: Literal["earned", "spent", "bonus"]
    description: str
    created_at: datetime
    exchange: Optional[ExchangeSummary] = None


class TimeCreditsResponse(BaseSchema):
    current_balance: int
    history: List[CreditTransactionResponse]
    pagination: Pagination
