"""
User model - represents a SkillTrade member.
"""
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List
from sqlalchemy import String, Boolean, Text, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skilltrade.models.base import BaseModel, utcnow

if TYPE_CHECKING:
    from skilltrade.models.skill import Skill


class User(BaseModel):
    """
    User entity.

    Stores credentials, the public profile, and the time credit balance.
    The balance always equals the sum of the user's ledger entries.
    """

    __tablename__ = "users"

    __table_args__ = (
        CheckConstraint(
            "profile_completion BETWEEN 0 AND 100",
            name="ck_users_profile_completion",
        ),
    )

    # Authentication
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    occupation: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Economy
    time_credits: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    profile_completion: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Status
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    # Activity tracking
    last_active: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=True,
    )

    # Relationships
    skills: Mapped[List["Skill"]] = relationship(
        "Skill",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Skill.created_at.desc()",
    )

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<User {self.email}>"
