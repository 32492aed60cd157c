"""
API Routes package.
"""
from fastapi import APIRouter

from skilltrade.api.routes.auth import router as auth_router
from skilltrade.api.routes.health import router as health_router
from skilltrade.api.routes.profile import router as profile_router
from skilltrade.api.routes.skills import router as skills_router
from skilltrade.api.routes.matches import router as matches_router
from skilltrade.api.routes.messages import router as messages_router
from skilltrade.api.routes.discover import router as discover_router
from skilltrade.api.routes.time_credits import router as time_credits_router
from skilltrade.api.routes.exchanges import router as exchanges_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(profile_router)
api_router.include_router(skills_router)
api_router.include_router(matches_router)
api_router.include_router(messages_router)
api_router.include_router(discover_router)
api_router.include_router(time_credits_router)
api_router.include_router(exchanges_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "profile_router",
    "skills_router",
    "matches_router",
    "messages_router",
    "discover_router",
    "time_credits_router",
    "exchanges_router",
]
