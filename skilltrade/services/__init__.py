"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and own transaction boundaries.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from skilltrade.services.auth_service import AuthService
from skilltrade.services.profile_service import ProfileService
from skilltrade.services.skill_service import SkillService
from skilltrade.services.match_service import MatchService
from skilltrade.services.message_service import MessageService
from skilltrade.services.discover_service import DiscoverService
from skilltrade.services.time_credit_service import TimeCreditService
from skilltrade.services.exchange_service import ExchangeService

__all__ = [
    "AuthService",
    "ProfileService",
    "SkillService",
    "MatchService",
    "MessageService",
    "DiscoverService",
    "TimeCreditService",
    "ExchangeService",
]
