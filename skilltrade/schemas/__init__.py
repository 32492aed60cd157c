"""
Pydantic schemas for API validation and serialization.
"""
from skilltrade.schemas.base import (
    BaseSchema,
    Pagination,
    MessageResponse,
    ErrorResponse,
)
from skilltrade.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    AuthResponse,
    RefreshTokenRequest,
    ChangePasswordRequest,
)
from skilltrade.schemas.user import (
    UserResponse,
    UserProfileResponse,
    ProfileUpdate,
    UserCard,
)
from skilltrade.schemas.skill import (
    SkillCreate,
    SkillResponse,
    SkillsByType,
    BulkSkillsUpdate,
)
from skilltrade.schemas.match import (
    SwipeRequest,
    SwipeResponse,
    MatchCandidate,
    MatchCandidatesResponse,
    MutualMatch,
    MutualMatchesResponse,
)
from skilltrade.schemas.message import (
    SendMessageRequest,
    ChatMessageResponse,
    ThreadMessage,
    ThreadResponse,
    Conversation,
    ConversationsResponse,
)
from skilltrade.schemas.discover import (
    DiscoverSkill,
    DiscoverResponse,
)
from skilltrade.schemas.exchange import (
    ExchangeCreate,
    ExchangeRateRequest,
    ExchangeResponse,
    ExchangeListResponse,
)
from skilltrade.schemas.time_credit import (
    CreditTransactionResponse,
    TimeCreditsResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "Pagination",
    "MessageResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "AuthResponse",
    "RefreshTokenRequest",
    "ChangePasswordRequest",
    # User
    "UserResponse",
    "UserProfileResponse",
    "ProfileUpdate",
    "UserCard",
    # Skill
    "SkillCreate",
    "SkillResponse",
    "SkillsByType",
    "BulkSkillsUpdate",
    # Match
    "SwipeRequest",
    "SwipeResponse",
    "MatchCandidate",
    "MatchCandidatesResponse",
    "MutualMatch",
    "MutualMatchesResponse",
    # Message
    "SendMessageRequest",
    "ChatMessageResponse",
    "ThreadMessage",
    "ThreadResponse",
    "Conversation",
    "ConversationsResponse",
    # Discover
    "DiscoverSkill",
    "DiscoverResponse",
    # Exchange
    "ExchangeCreate",
    "ExchangeRateRequest",
    "ExchangeResponse",
    "ExchangeListResponse",
    # Time credits
    "CreditTransactionResponse",
    "TimeCreditsResponse",
]
