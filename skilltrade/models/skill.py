"""
Skill model - something a user can teach or wants to learn.
"""
import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, Text, Integer, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skilltrade.models.base import BaseModel

if TYPE_CHECKING:
    from skilltrade.models.user import User


SKILL_OFFERING = "offering"
SKILL_SEEKING = "seeking"


class Skill(BaseModel):
    """
    Skill entity.

    Belongs to exactly one user. `type` says whether the user offers
    the skill or is looking to learn it.
    """

    __tablename__ = "skills"

    __table_args__ = (
        CheckConstraint("type IN ('offering', 'seeking')", name="ck_skills_type"),
        CheckConstraint(
            "proficiency_level BETWEEN 1 AND 5",
            name="ck_skills_proficiency_level",
        ),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(
        String(100),
        default="General",
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    proficiency_level: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")

    def __repr__(self) -> str:
        return f"<Skill {self.name} ({self.type}) for user_id={self.user_id}>"
