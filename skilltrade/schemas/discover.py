"""
Discovery schemas.
"""
from typing import List
from uuid import UUID
from skilltrade.schemas.base import BaseSchema, Pagination
from skilltrade.schemas.user import UserCard


class DiscoverSkill(BaseSchema):
    id: UUID
    title: str
    description: str
    category: str
    proficiency_level: int
    user: UserCard
    tags: List[str]


class DiscoverResponse(BaseSchema):
    skills: List[DiscoverSkill]
    pagination: Pagination
