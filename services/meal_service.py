from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealWrite
from repositories import MealRepository
from services.adherence import AdherenceSummary, summarize
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")

MEAL_NOT_FOUND = "Meal not found."


class MealService:
    """Business logic for an owner's meal log.

    ``user_id`` is always the already-resolved session owner. Every lookup
    is owner-scoped, so another owner's meal raises the same NotFoundError
    as a missing one.
    """

    @staticmethod
    def create_meal(db: Session, user_id: str, data: MealWrite) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id,
            name=data.name,
            description=data.description,
            consumed_at=data.consumed_at,
            on_diet=data.on_diet,
        )
        logger.info(f"meal_created meal_id={meal.id} user_id={user_id}")
        return meal

    @staticmethod
    def get_meal(db: Session, user_id: str, meal_id: UUID) -> Meal:
        meal = MealRepository(db).get_meal(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        return meal

    @staticmethod
    def update_meal(db: Session, user_id: str, meal_id: UUID, data: MealWrite) -> None:
        """
        Replace every mutable field of a meal (no partial patch).

        Raises:
            NotFoundError: If the meal does not exist or belongs to someone else
        """
        replaced = MealRepository(db).replace_meal(
            user_id,
            meal_id,
            name=data.name,
            description=data.description,
            consumed_at=data.consumed_at,
            on_diet=data.on_diet,
        )
        if not replaced:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        logger.info(f"meal_updated meal_id={meal_id} user_id={user_id}")

    @staticmethod
    def delete_meal(db: Session, user_id: str, meal_id: UUID) -> None:
        if not MealRepository(db).delete_meal(user_id, meal_id):
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        logger.info(f"meal_deleted meal_id={meal_id} user_id={user_id}")

    @staticmethod
    def list_meals(db: Session, user_id: str) -> List[Meal]:
        return MealRepository(db).list_by_owner(user_id)

    @staticmethod
    def get_summary(db: Session, user_id: str) -> AdherenceSummary:
        """Summarize the owner's meals in creation order."""
        meals = MealRepository(db).list_by_owner(user_id)
        summary = summarize(meal.on_diet for meal in meals)
        logger.info(
            f"summary_computed user_id={user_id} total={summary.total} "
            f"best_streak={summary.best_streak}"
        )
        return summary
