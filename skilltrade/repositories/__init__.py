"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from skilltrade.repositories.base import BaseRepository
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.repositories.skill_repository import SkillRepository
from skilltrade.repositories.match_repository import MatchRepository
from skilltrade.repositories.message_repository import MessageRepository, ConversationSummary
from skilltrade.repositories.exchange_repository import ExchangeRepository
from skilltrade.repositories.time_credit_repository import TimeCreditRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SkillRepository",
    "MatchRepository",
    "MessageRepository",
    "ConversationSummary",
    "ExchangeRepository",
    "TimeCreditRepository",
]
