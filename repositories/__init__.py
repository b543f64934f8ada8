"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, OwnedRepository
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository

__all__ = [
    "BaseRepository",
    "OwnedRepository",
    "UserRepository",
    "MealRepository",
]
