"""
API dependencies for dependency injection.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.database import get_db
from skilltrade.core.security import decode_token, verify_token_type, token_subject
from skilltrade.core.exceptions import (
    UnauthorizedException,
    InvalidTokenException,
)
from skilltrade.models.user import User
from skilltrade.repositories.user_repository import UserRepository


# Security scheme
security = HTTPBearer(auto_error=False)

user_repo = UserRepository()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the current authenticated user and stamp their activity.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If the token is invalid, expired, not an access
            token, or its user is gone or disabled
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)

    if not payload:
        raise InvalidTokenException()

    if not verify_token_type(payload, "access"):
        raise InvalidTokenException()

    user_id = token_subject(payload)
    if not user_id:
        raise InvalidTokenException()

    user = await user_repo.get_active_by_id(db, user_id)
    if not user:
        raise InvalidTokenException()

    user.last_active = datetime.now(timezone.utc)
    await db.commit()

    # Rate limiter keys on this
    request.state.current_user = user
    return user
