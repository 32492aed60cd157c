"""Core module exports."""
from skilltrade.core.config import settings, get_settings
from skilltrade.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from skilltrade.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
    token_subject,
)
from skilltrade.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    InvalidCredentialsException,
    InvalidTokenException,
    UserNotFoundException,
    SkillNotFoundException,
    ExchangeNotFoundException,
    EmailAlreadyExistsException,
    NotMatchedException,
    InsufficientCreditsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "verify_token_type",
    "token_subject",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "UserNotFoundException",
    "SkillNotFoundException",
    "ExchangeNotFoundException",
    "EmailAlreadyExistsException",
    "NotMatchedException",
    "InsufficientCreditsException",
]
