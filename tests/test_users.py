"""
Tests for owner registration.

Registration is the only way to obtain a session: the new user's id is
returned as the ``userId`` cookie, never in the body.
"""

import logging

import pytest

from test_fixtures import client, db_session, new_client, register, unique_email
from repositories import UserRepository


def test_register_sets_session_cookie(client, db_session):
    r = client.post(
        "/users", json={"name": "Sarah Martinez", "email": unique_email("sarah")}
    )
    assert r.status_code == 201
    assert r.content == b""

    set_cookie = r.headers["set-cookie"]
    assert set_cookie.startswith("userId=")
    assert "Max-Age=604800" in set_cookie
    assert "Path=/" in set_cookie
    assert "HttpOnly" in set_cookie

    owner_id = client.cookies.get("userId")
    user = UserRepository(db_session).get_by_id(owner_id)
    assert user is not None
    assert user.name == "Sarah Martinez"


def test_register_logs_cookie_issued(client, caplog):
    with caplog.at_level(logging.INFO, logger="dailydiet.api.users"):
        owner_id = register(client)

    messages = [r.getMessage() for r in caplog.records if r.name == "dailydiet.api.users"]
    assert messages == [f"session_cookie_issued user_id={owner_id}"]


def test_each_registration_gets_new_identity(db_session):
    a = new_client()
    b = new_client()
    assert register(a) != register(b)


def test_registered_client_can_use_meal_routes(client):
    register(client)
    assert client.get("/meals").status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Sarah Martinez"},
        {"email": "sarah@example.com"},
        {"name": "Sarah Martinez", "email": "not-an-email"},
        {"name": "", "email": "sarah@example.com"},
    ],
    ids=["missing-email", "missing-name", "bad-email", "empty-name"],
)
def test_register_validation(client, body):
    r = client.post("/users", json=body)
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "set-cookie" not in r.headers
