"""
Shared test fixtures and utilities for the DailyDiet test suite.

This module contains the database session fixture, per-test HTTP clients
and factories for realistic request payloads, reused across test files.
"""

import uuid
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.models import Base, SessionLocal, engine
from main import app


# Realistic default owners
REALISTIC_USERS = {
    "default": {"name": "Sarah Martinez", "email_prefix": "sarah.martinez"},
    "athlete": {"name": "Michael Chen", "email_prefix": "michael.chen"},
    "casual": {"name": "Emma Johnson", "email_prefix": "emma.johnson"},
}


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def meal_payload(
    name="Grilled chicken salad",
    description="Chicken breast, lettuce, olive oil",
    when="2025-11-01T12:30:00Z",
    on_diet=True,
) -> dict:
    """
    Build a meal request body in wire format.

    Example:
        >>> meal_payload(name="Pizza", on_diet=False)["onDiet"]
        False
    """
    body = {"name": name, "datetime": when, "onDiet": on_diet}
    if description is not None:
        body["description"] = description
    return body


def new_client() -> TestClient:
    """TestClient with its own cookie jar (one browser per owner)"""
    return TestClient(app)


def register(test_client: TestClient, profile_type: str = "default") -> str:
    """Register an owner through the API and return its session cookie value"""
    profile = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    response = test_client.post(
        "/users",
        json={"name": profile["name"], "email": unique_email(profile["email_prefix"])},
    )
    assert response.status_code == 201
    return test_client.cookies.get("userId")


# =============================================================================
# DATABASE SESSION FIXTURE
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Fresh schema on the shared in-memory SQLite engine for every test.

    The API under test uses the same engine, so rows written through the
    client are visible to this session and vice versa.

    Yields:
        Session: SQLAlchemy database session
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> TestClient:
    """Anonymous client on a clean database"""
    return new_client()


@pytest.fixture(scope="function")
def owner_client(db_session: Session) -> TestClient:
    """Client already registered as an owner (session cookie set)"""
    c = new_client()
    register(c)
    return c
