"""Meal log routes.

Every route runs as the owner resolved from the session cookie; requests
without one are rejected with 401 before the store is touched.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_current_owner, get_db
from domain.mappers import MealMapper
from domain.schemas.meal_schemas import (
    MealWrite,
    MealResponse,
    MealListResponse,
    MealSummaryResponse,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    payload: MealWrite,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Log a meal for the current owner"""
    MealService.create_meal(db, owner_id, payload)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(
    owner_id: str = Depends(get_current_owner), db: Session = Depends(get_db)
):
    """All meals of the current owner, oldest record first"""
    return MealMapper.to_list_response(MealService.list_meals(db, owner_id))


# Declared before /{meal_id} so "summary" is not parsed as an id
@router.get("/summary", response_model=MealSummaryResponse)
def get_summary(
    owner_id: str = Depends(get_current_owner), db: Session = Depends(get_db)
):
    """
    Diet adherence statistics for the current owner.

    Returns total meals, meals on and off the diet, and the longest run of
    consecutive on-diet meals in the order they were logged.
    """
    return MealMapper.to_summary_response(MealService.get_summary(db, owner_id))


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    return MealMapper.to_response(MealService.get_meal(db, owner_id, meal_id))


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_meal(
    meal_id: UUID,
    payload: MealWrite,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Replace all fields of a meal; send unchanged values again to keep them"""
    MealService.update_meal(db, owner_id, meal_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal(
    meal_id: UUID,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    MealService.delete_meal(db, owner_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
