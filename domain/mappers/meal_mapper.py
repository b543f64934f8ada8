"""
Meal domain mappers.
Handles transformation between ORM models, summarizer output and DTOs.
"""

from typing import Iterable

from domain.models import Meal
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListResponse,
    MealSummaryResponse,
)
from services.adherence import AdherenceSummary


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse(
            id=meal.id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            consumed_at=meal.consumed_at,
            on_diet=meal.on_diet,
            created_at=meal.created_at,
            updated_at=meal.updated_at,
        )

    @staticmethod
    def to_list_response(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])

    @staticmethod
    def to_summary_response(summary: AdherenceSummary) -> MealSummaryResponse:
        """
        Convert summarizer output to the public statistics object.

        Args:
            summary: AdherenceSummary computed over one owner's meals

        Returns:
            MealSummaryResponse with the wire field names
        """
        return MealSummaryResponse(
            total=summary.total,
            onDietMeals=summary.on_diet_count,
            offDietMeals=summary.off_diet_count,
            bestSequenceOfOnDietMeals=summary.best_streak,
        )
