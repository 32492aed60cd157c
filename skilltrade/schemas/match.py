"""
Match (swipe) schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID
from skilltrade.schemas.base import BaseSchema
from skilltrade.schemas.user import UserCard


class SwipeRequest(BaseSchema):
    """Like or pass on another user."""

    target_user_id: UUID
    action: Literal["like", "pass"]


class SwipeResponse(BaseSchema):
    is_match: bool
    message: str


class MatchCandidate(BaseSchema):
    """A potential match: offers something the current user is seeking."""

    id: UUID
    name: str
    avatar: str
    bio: str
    location: Optional[str] = None
    occupation: Optional[str] = None
    offering: List[str]
    seeking: List[str]
    tags: List[str]


class MatchCandidatesResponse(BaseSchema):
    matches: List[MatchCandidate]


class MutualMatch(BaseSchema):
    """An accepted match from the current user's point of view."""

    match_id: UUID
    user: UserCard
    matched_at: datetime


class MutualMatchesResponse(BaseSchema):
    matches: List[MutualMatch]
