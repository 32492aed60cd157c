"""
API package.
"""
from skilltrade.api.routes import api_router
from skilltrade.api.deps import get_current_user

__all__ = [
    "api_router",
    "get_current_user",
]
