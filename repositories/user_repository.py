"""
User Repository - Data access layer for registered owners
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import PersistenceError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: str) -> Optional[AppUser]:
        """Get user by its opaque identifier"""
        try:
            return self.db.query(AppUser).filter(AppUser.user_id == user_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError("Could not read AppUser") from e

    def create_user(self, name: str, email: str) -> AppUser:
        """Create a new user with a freshly generated identifier"""
        return self.create(AppUser(name=name, email=email))
