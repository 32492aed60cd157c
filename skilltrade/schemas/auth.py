"""
Authentication schemas.
"""
import re

from pydantic import EmailStr, Field, field_validator, model_validator
from skilltrade.schemas.base import BaseSchema
from skilltrade.schemas.user import PersonName, UserResponse

_PASSWORD_STRENGTH = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


def check_password_strength(value: str) -> str:
    if not _PASSWORD_STRENGTH.search(value):
        raise ValueError("Password must contain uppercase, lowercase, and number")
    return value


class LoginRequest(BaseSchema):
    """Login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseSchema):
    """Registration request body."""

    first_name: PersonName
    last_name: PersonName
    email: EmailStr
    password: str = Field(..., min_length=8)
    confirm_password: str

    @field_validator("password")
    @classmethod
    def _check_strength(cls, v: str) -> str:
        return check_password_strength(v)

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class TokenResponse(BaseSchema):
    """Token pair issued after successful authentication."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class AuthResponse(TokenResponse):
    """Register/login response: the user plus a fresh token pair."""

    user: UserResponse


class RefreshTokenRequest(BaseSchema):
    """Refresh token request body."""

    refresh_token: str


class ChangePasswordRequest(BaseSchema):
    """Change password request body."""

    current_password: str
    new_password: str = Field(..., min_length=8)

    @field_validator("new_password")
    @classmethod
    def _check_strength(cls, v: str) -> str:
        return check_password_strength(v)
