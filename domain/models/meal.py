"""
Meal log database model.
"""

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base, IsoDateTime, utcnow


class Meal(Base):
    """A single logged meal with its diet adherence flag"""

    __tablename__ = "meal"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        String(64),
        ForeignKey("app_user.user_id"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text)
    # When the meal was eaten, as reported by the owner
    consumed_at = Column(IsoDateTime(), nullable=False)
    on_diet = Column(Boolean, nullable=False)
    # UTC, microsecond precision; summary ordering relies on it
    created_at = Column(IsoDateTime(timespec="microseconds"), nullable=False, default=utcnow)
    updated_at = Column(IsoDateTime(timespec="microseconds"), nullable=False, default=utcnow)

    user = relationship("AppUser", back_populates="meals")

    __table_args__ = (Index("ix_meal_user_created", "user_id", "created_at"),)
