"""
Meal Repository - Data access layer for meal logs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import OwnedRepository
from domain.models import Meal
from domain.models.database import utcnow


class MealRepository(OwnedRepository[Meal]):
    """Repository for meal data access, scoped to the owning user"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def create_meal(
        self,
        user_id: str,
        name: str,
        consumed_at: datetime,
        on_diet: bool,
        description: Optional[str] = None,
    ) -> Meal:
        """Insert a meal; id and both timestamps are assigned here"""
        now = utcnow()
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            consumed_at=consumed_at,
            on_diet=on_diet,
            created_at=now,
            updated_at=now,
        )
        return self.create(meal)

    def get_meal(self, user_id: str, meal_id: UUID) -> Optional[Meal]:
        return self.get_owned(user_id, meal_id)

    def replace_meal(
        self,
        user_id: str,
        meal_id: UUID,
        name: str,
        consumed_at: datetime,
        on_diet: bool,
        description: Optional[str] = None,
    ) -> bool:
        """Overwrite every mutable field and bump updated_at. created_at is never touched."""
        return self.update_owned(
            user_id,
            meal_id,
            {
                "name": name,
                "description": description,
                "consumed_at": consumed_at,
                "on_diet": on_diet,
                "updated_at": utcnow(),
            },
        )

    def delete_meal(self, user_id: str, meal_id: UUID) -> bool:
        return self.delete_owned(user_id, meal_id)

    def list_by_owner(self, user_id: str) -> List[Meal]:
        """All meals of a user, oldest record first"""
        return self.list_owned(user_id, Meal.created_at.asc())
