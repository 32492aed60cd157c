"""
User and profile schemas.
"""
from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from uuid import UUID
from pydantic import EmailStr, Field, HttpUrl, StringConstraints, field_validator
from skilltrade.schemas.base import BaseSchema, IDSchema

DEFAULT_AVATAR = "/placeholder.svg?height=300&width=300"
CHAT_AVATAR = "/placeholder.svg?height=40&width=40"

WEBSITE_MAX_LENGTH = 500

# Surrounding whitespace is dropped before the length check.
PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]


class UserResponse(IDSchema):
    """The authenticated user's own view of their account."""

    email: EmailStr
    first_name: str
    last_name: str
    name: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    occupation: Optional[str] = None
    website: Optional[str] = None
    time_credits: int
    profile_completion: int
    is_verified: bool
    is_active: bool
    created_at: datetime
    last_active: Optional[datetime] = None


class UserProfileResponse(UserResponse):
    """Full profile response."""

    skills_count: int = 0


class ProfileUpdate(BaseSchema):
    """Profile update. Omitted fields are left untouched."""

    first_name: Optional[PersonName] = None
    last_name: Optional[PersonName] = None
    bio: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    occupation: Optional[str] = Field(None, max_length=255)
    website: Optional[Union[HttpUrl, Literal[""]]] = None
    avatar_url: Optional[str] = Field(None, max_length=500)

    @field_validator("website")
    @classmethod
    def _cap_website(cls, v):
        if v and len(str(v)) > WEBSITE_MAX_LENGTH:
            raise ValueError(f"Website must be at most {WEBSITE_MAX_LENGTH} characters")
        return v


class UserCard(BaseSchema):
    """Public card shown to other users."""

    id: UUID
    name: str
    avatar: str
    location: Optional[str] = None
    occupation: Optional[str] = None
