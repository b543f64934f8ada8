"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService

# Note: adherence contains pure functions, not a class

__all__ = [
    "UserService",
    "MealService",
]
