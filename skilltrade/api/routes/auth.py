"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.database import get_db
from skilltrade.core.rate_limit import limiter, RATE_AUTH
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
)
from skilltrade.schemas.base import MessageResponse
from skilltrade.schemas.user import UserResponse
from skilltrade.services.auth_service import AuthService
from skilltrade.services.profile_service import to_user_response

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.

    Returns the user and a token pair. New accounts start with the signup bonus.
    """
    return await auth_service.register(
        db,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )


@router.post("/login", response_model=AuthResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Login with email and password."""
    return await auth_service.login(db, email=payload.email, password=payload.password)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    payload: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Refresh access token using refresh token.
    """
    return await auth_service.refresh(db, refresh_token=payload.refresh_token)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """
    Logout current user.

    Note: With JWT, logout is handled client-side by discarding tokens.
    """
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return to_user_response(current_user)
