"""
Owner (user) database model.
"""

import uuid

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from domain.models.database import Base, IsoDateTime, utcnow


class AppUser(Base):
    """Registered owner of meal records.

    ``user_id`` is the opaque session token handed to the browser; it is
    stored and compared as a plain string, never parsed.
    """

    __tablename__ = "app_user"

    user_id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    created_at = Column(IsoDateTime(timespec="microseconds"), nullable=False, default=utcnow)
    updated_at = Column(
        IsoDateTime(timespec="microseconds"), nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    meals = relationship("Meal", back_populates="user")
