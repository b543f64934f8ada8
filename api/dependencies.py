"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_owner(request: Request) -> str:
    """
    Resolve the owner of the request from the session cookie.

    The cookie value is an opaque token: it is never parsed, only compared
    against ``meal.user_id``.

    Raises:
        UnauthorizedError: If the cookie is missing or empty
    """
    owner_id = request.cookies.get(settings.session_cookie_name)
    if not owner_id:
        raise UnauthorizedError()
    return owner_id
