"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate
from domain.schemas.meal_schemas import (
    MealWrite,
    MealResponse,
    MealListResponse,
    MealSummaryResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    # Meal schemas
    "MealWrite",
    "MealResponse",
    "MealListResponse",
    "MealSummaryResponse",
]
