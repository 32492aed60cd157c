"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """400 Validation Error"""

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, message, details)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid email or password"""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


# Resource specific exceptions
class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self, message: str = "User not found"):
        super().__init__(message=message, code="USER_NOT_FOUND")


class SkillNotFoundException(NotFoundException):
    """Skill not found"""

    def __init__(self):
        super().__init__(message="Skill not found", code="SKILL_NOT_FOUND")


class ExchangeNotFoundException(NotFoundException):
    """Exchange not found"""

    def __init__(self):
        super().__init__(message="Exchange not found", code="EXCHANGE_NOT_FOUND")


class EmailAlreadyExistsException(ConflictException):
    """Email already registered"""

    def __init__(self):
        super().__init__(
            message="User with this email already exists",
            code="EMAIL_EXISTS",
        )


class NotMatchedException(ForbiddenException):
    """The two users hold no accepted match"""

    def __init__(self, message: str = "You can only interact with users you have matched with"):
        super().__init__(message=message, code="NOT_MATCHED")


class InsufficientCreditsException(BadRequestException):
    """Balance too low for the requested debit"""

    def __init__(self):
        super().__init__(
            message="Not enough time credits",
            code="INSUFFICIENT_CREDITS",
        )
