"""
Discover routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from skilltrade.core.config import settings
from skilltrade.core.database import get_db
from skilltrade.api.deps import get_current_user
from skilltrade.models.user import User
from skilltrade.schemas.discover import DiscoverResponse
from skilltrade.services.discover_service import DiscoverService

router = APIRouter(prefix="/discover", tags=["discover"])

discover_service = DiscoverService()


@router.get("", response_model=DiscoverResponse)
async def discover(
    q: Optional[str] = Query(None, max_length=200, description="Search in skill name and description"),
    category: Optional[str] = Query(None, max_length=100),
    limit: int = Query(20, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Skills offered by other members, newest first."""
    return await discover_service.discover(
        db,
        current_user,
        q=q,
        category=category,
        limit=limit,
        offset=offset,
    )
