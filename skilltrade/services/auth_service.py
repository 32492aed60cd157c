"""
Authentication service - handles registration, login, and token management.
"""
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.logging import get_logger
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
    InvalidCredentialsException,
    EmailAlreadyExistsException,
    InvalidTokenException,
)
from skilltrade.models.user import User
from skilltrade.repositories.user_repository import UserRepository
from skilltrade.schemas.auth import AuthResponse, TokenResponse
from skilltrade.services.profile_service import ProfileService, to_user_response
from skilltrade.services.time_credit_service import TimeCreditService

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.profile_service = ProfileService()
        self.credit_service = TimeCreditService()

    async def register(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResponse:
        """
        Register a new user, grant the signup bonus, and return tokens.

        Raises:
            EmailAlreadyExistsException: If email is already registered.
        """
        email = email.lower()
        if await self.user_repo.email_exists(db, email):
            raise EmailAlreadyExistsException()

        try:
            user = await self.user_repo.create(
                db,
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                time_credits=0,
            )
        except IntegrityError as e:
            # A concurrent registration took the email after the check above.
            await db.rollback()
            raise EmailAlreadyExistsException() from e
        if settings.signup_bonus_credits > 0:
            await self.credit_service.grant_bonus(
                db,
                user,
                settings.signup_bonus_credits,
                "Welcome bonus",
            )
        await self.profile_service.refresh_completion(db, user)
        await db.commit()

        logger.info("user_registered", user_id=str(user.id))
        return self._auth_response(user)

    async def login(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
    ) -> AuthResponse:
        """
        Authenticate user and return tokens.

        Raises:
            InvalidCredentialsException: If email/password is wrong or the account is disabled.
        """
        user = await self.user_repo.get_by_email(db, email.lower())

        if not user or not user.is_active or not verify_password(password, user.password_hash):
            logger.info("login_failed", email_domain=email.rpartition("@")[2])
            raise InvalidCredentialsException()

        user.last_active = datetime.now(timezone.utc)
        await db.commit()

        logger.info("user_logged_in", user_id=str(user.id))
        return self._auth_response(user)

    async def refresh(
        self,
        db: AsyncSession,
        *,
        refresh_token: str,
    ) -> TokenResponse:
        """
        Issue new tokens using a valid refresh token.

        Raises:
            InvalidTokenException: If refresh token is invalid or expired.
        """
        payload = decode_token(refresh_token)

        if not payload or not verify_token_type(payload, "refresh"):
            raise InvalidTokenException()

        user_id = token_subject(payload)
        if not user_id:
            raise InvalidTokenException()

        user = await self.user_repo.get_active_by_id(db, user_id)
        if not user:
            raise InvalidTokenException()

        return self._generate_tokens(user)

    def _generate_tokens(self, user: User) -> TokenResponse:
        """Generate access and refresh tokens for a user."""
        access_token = create_access_token({"sub": str(user.id)})
        refresh_token = create_refresh_token({"sub": str(user.id)})

        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.access_token_expire_minutes * 60,
        )

    def _auth_response(self, user: User) -> AuthResponse:
        tokens = self._generate_tokens(user)
        return AuthResponse(**tokens.model_dump(), user=to_user_response(user))
