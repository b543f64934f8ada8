"""User registration routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from app.config import settings
from domain.schemas.user_schemas import UserCreate
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a user and hand its identifier to the browser as the session cookie"""
    new_user = UserService.register(db, user.name, user.email)

    response = Response(status_code=status.HTTP_201_CREATED)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=new_user.user_id,
        max_age=settings.session_max_age_sec,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
    )
    logger.info(f"session_cookie_issued user_id={new_user.user_id}")
    return response
