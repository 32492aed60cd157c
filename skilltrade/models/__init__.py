"""
Database models for SkillTrade.

All models use UUID primary keys and include created_at/updated_at timestamps.
"""
from skilltrade.models.base import BaseModel, TimestampMixin, UUIDMixin
from skilltrade.models.user import User
from skilltrade.models.skill import Skill
from skilltrade.models.match import Match
from skilltrade.models.message import Message
from skilltrade.models.exchange import Exchange
from skilltrade.models.time_credit import TimeCreditTransaction

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "Skill",
    "Match",
    "Message",
    "Exchange",
    "TimeCreditTransaction",
]
