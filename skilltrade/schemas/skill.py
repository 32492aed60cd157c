"""
Skill schemas.
"""
from datetime import datetime
from typing import Annotated, List, Literal, Optional
from uuid import UUID
from pydantic import Field, StringConstraints
from skilltrade.schemas.base import BaseSchema

SkillType = Literal["offering", "seeking"]

# Matches skills.name; blank names are rejected after trimming.
SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


class SkillCreate(BaseSchema):
    """Add a single skill."""

    name: SkillName
    category: Optional[str] = Field(None, max_length=100)
    type: SkillType
    proficiency_level: int = Field(1, ge=1, le=5)
    description: Optional[str] = None


class SkillResponse(BaseSchema):
    """A stored skill."""

    id: UUID
    name: str
    category: str
    type: SkillType
    proficiency_level: int
    description: Optional[str] = None
    created_at: datetime


class SkillsByType(BaseSchema):
    """A user's skills split by type, newest first."""

    offering: List[SkillResponse]
    seeking: List[SkillResponse]


class BulkSkillsUpdate(BaseSchema):
    """Replace every skill of the user with these names."""

    offering: List[SkillName]
    seeking: List[SkillName]
