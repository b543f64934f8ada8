"""
Tests for the service layer.

- MealService maps missing / foreign meals to NotFoundError
- MealService.get_summary pipes the owner's meals, in creation order, into the summary
- UserService registration
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, unique_email
from services import MealService, UserService
from services.adherence import AdherenceSummary
from domain.schemas.meal_schemas import MealWrite
from app.exceptions import NotFoundError


def _write(name="Greek yogurt", on_diet=True, description=None) -> MealWrite:
    return MealWrite(
        name=name,
        description=description,
        datetime="2025-11-01T08:00:00Z",
        onDiet=on_diet,
    )


def _owner(db: Session, name="Emma Johnson") -> str:
    return UserService.register(db, name, unique_email("emma")).user_id


def test_register_returns_user_with_token(db_session: Session):
    user = UserService.register(db_session, "Emma Johnson", unique_email("emma"))
    assert user.user_id
    assert user.name == "Emma Johnson"


def test_create_and_get_meal(db_session: Session):
    owner = _owner(db_session)
    meal = MealService.create_meal(db_session, owner, _write(description="Plain"))

    fetched = MealService.get_meal(db_session, owner, meal.id)
    assert fetched.name == "Greek yogurt"
    assert fetched.description == "Plain"
    assert fetched.on_diet is True


def test_get_meal_of_other_owner_raises_not_found(db_session: Session):
    owner_a = _owner(db_session, "Emma Johnson")
    owner_b = _owner(db_session, "Raj Patel")
    meal = MealService.create_meal(db_session, owner_a, _write())

    with pytest.raises(NotFoundError) as exc_info:
        MealService.get_meal(db_session, owner_b, meal.id)
    assert exc_info.value.message == "Meal not found."

    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, owner_a, uuid.uuid4())


def test_update_meal_not_found(db_session: Session):
    owner_a = _owner(db_session, "Emma Johnson")
    owner_b = _owner(db_session, "Raj Patel")
    meal = MealService.create_meal(db_session, owner_a, _write())

    with pytest.raises(NotFoundError):
        MealService.update_meal(db_session, owner_b, meal.id, _write(name="Changed"))

    db_session.expire_all()
    assert MealService.get_meal(db_session, owner_a, meal.id).name == "Greek yogurt"


def test_delete_meal_then_delete_again(db_session: Session):
    owner = _owner(db_session)
    meal = MealService.create_meal(db_session, owner, _write())

    MealService.delete_meal(db_session, owner, meal.id)
    with pytest.raises(NotFoundError):
        MealService.delete_meal(db_session, owner, meal.id)


def test_summary_uses_creation_order(db_session: Session):
    """[on, on, off, on] in logging order gives a best streak of 2"""
    owner = _owner(db_session)
    for on_diet in (True, True, False, True):
        MealService.create_meal(db_session, owner, _write(on_diet=on_diet))

    assert MealService.get_summary(db_session, owner) == AdherenceSummary(
        total=4, on_diet_count=3, off_diet_count=1, best_streak=2
    )


def test_summary_only_counts_own_meals(db_session: Session):
    owner_a = _owner(db_session, "Emma Johnson")
    owner_b = _owner(db_session, "Raj Patel")
    MealService.create_meal(db_session, owner_a, _write(on_diet=True))
    MealService.create_meal(db_session, owner_b, _write(on_diet=False))
    MealService.create_meal(db_session, owner_a, _write(on_diet=True))

    summary = MealService.get_summary(db_session, owner_a)
    assert summary.total == 2
    assert summary.best_streak == 2


def test_summary_for_owner_without_meals(db_session: Session):
    assert MealService.get_summary(db_session, _owner(db_session)) == AdherenceSummary()
