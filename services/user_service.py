from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from repositories import UserRepository

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for owner registration"""

    @staticmethod
    def register(db: Session, name: str, email: str) -> AppUser:
        """Create an owner; its user_id becomes the browser's session token."""
        user = UserRepository(db).create_user(name=name, email=email)
        logger.info(f"user_registered user_id={user.user_id}")
        return user
