"""Tests for the user endpoints and service."""

import logging

import pytest

from mock_database.app.core.errors import NotFoundError
from mock_database.app.services.user_service import UserService


def test_list_users_returns_seed_in_order(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == [
        {"id": 1, "name": "John Doe", "email": "john@example.com"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
    ]


def test_list_users_is_stable(client):
    first = client.get("/users").json()
    second = client.get("/users").json()
    assert first == second


def test_get_user_by_id(client):
    resp = client.get("/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "John Doe", "email": "john@example.com"}


def test_every_seeded_user_is_retrievable(client, store):
    for user in store.users:
        resp = client.get(f"/users/{user.id}")
        assert resp.status_code == 200
        assert resp.json() == user.model_dump()


@pytest.mark.parametrize("user_id", ["999", "0", "-1"])
def test_get_unknown_user_returns_404(client, user_id):
    resp = client.get(f"/users/{user_id}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


@pytest.mark.parametrize("user_id", ["abc", "NaN", "%20"])
def test_non_integer_user_id_is_not_found(client, user_id):
    resp = client.get(f"/users/{user_id}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_user_id_with_trailing_garbage_uses_integer_prefix(client):
    resp = client.get("/users/2abc")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Jane Smith"


async def test_service_raises_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        await UserService.get_user(store, 42)
    assert str(excinfo.value) == "User not found"


def test_queries_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="mock_database.app.services.user_service"):
        client.get("/users")
        client.get("/users/2")
        client.get("/users/abc")
    messages = [r.getMessage() for r in caplog.records]
    assert "Database query: SELECT * FROM users" in messages
    assert "Database query: SELECT * FROM users WHERE id = 2" in messages
    assert "Database query: SELECT * FROM users WHERE id = NaN" in messages
