"""
Exchange (teaching session) schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID
from pydantic import Field
from skilltrade.schemas.base import BaseSchema, IDSchema, TimestampSchema

ExchangeStatus = Literal["scheduled", "completed", "cancelled"]


class ExchangeCreate(BaseSchema):
    """Schedule a session. The caller teaches, student_id learns."""

    student_id: UUID
    skill_offered: str = Field(..., min_length=1, max_length=255)
    skill_requested: str = Field(..., min_length=1, max_length=255)
    duration_minutes: int = Field(60, ge=15, le=480)
    credits_amount: int = Field(1, ge=1, le=20)
    scheduled_at: Optional[datetime] = None


class ExchangeRateRequest(BaseSchema):
    rating: int = Field(..., ge=1, le=5)
    feedback: Optional[str] = Field(None, max_length=2000)


class ExchangeResponse(IDSchema, TimestampSchema):
    match_id: Optional[UUID] = None
    teacher_id: UUID
    student_id: UUID
    role: Literal["teacher", "student"]
    skill_offered: str
    skill_requested: str
    duration_minutes: int
    credits_amount: int
    status: ExchangeStatus
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    rating: Optional[int] = None
    feedback: Optional[str] = None


class ExchangeListResponse(BaseSchema):
    exchanges: List[ExchangeResponse]
