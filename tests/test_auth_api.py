"""
Account API tests - register, login, logout and the session they manage.
"""

import pytest
from httpx import AsyncClient

from memequiz.core.auth import AuthResult
from memequiz.core.dependencies import get_credential_verifier


@pytest.mark.asyncio
async def test_register_then_login(client: AsyncClient):
    response = await client.post("/api/register", json={"username": "carol", "password": "s3cret"})
    assert response.status_code == 200

    response = await client.post("/api/login", json={"username": "carol", "password": "s3cret"})
    assert response.status_code == 200
    assert "memequiz_session" in response.cookies

    response = await client.get("/api/user/gamecount")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_user):
    response = await client.post("/api/login", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect password."
    assert "memequiz_session" not in response.cookies

    response = await client.get("/api/user/gamecount")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_user(client: AsyncClient):
    response = await client.post("/api/login", json={"username": "ghost", "password": "boo"})
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found. Please register."


@pytest.mark.asyncio
async def test_logout_ends_session(logged_in_client: AsyncClient):
    assert (await logged_in_client.get("/api/user/gamecount")).status_code == 200

    response = await logged_in_client.post("/api/logout")
    assert response.status_code == 200

    assert (await logged_in_client.get("/api/user/gamecount")).status_code == 401


@pytest.mark.asyncio
async def test_logout_when_anonymous_is_ok(client: AsyncClient):
    response = await client.post("/api/logout")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_register_allows_duplicate_usernames(client: AsyncClient, store):
    for password in ("first", "second"):
        response = await client.post("/api/register", json={"username": "dup", "password": password})
        assert response.status_code == 200

    # Login goes against the oldest account with that name
    ok = await client.post("/api/login", json={"username": "dup", "password": "first"})
    assert ok.status_code == 200
    rejected = await client.post("/api/login", json={"username": "dup", "password": "second"})
    assert rejected.status_code == 401


@pytest.mark.asyncio
async def test_register_missing_field_is_rejected(client: AsyncClient):
    response = await client.post("/api/register", json={"username": "nopass"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_register_store_failure(client: AsyncClient, store, monkeypatch):
    from sqlalchemy.exc import OperationalError

    async def failing_create_user(username, password):
        raise OperationalError("INSERT INTO users", {}, Exception("database is locked"))

    monkeypatch.setattr(store, "create_user", failing_create_user)
    response = await client.post("/api/register", json={"username": "erin", "password": "pw"})
    assert response.status_code == 500
    assert response.json() == {"detail": "Registration failed"}


@pytest.mark.asyncio
async def test_credential_verifier_is_replaceable(app, client: AsyncClient, test_user):
    class AcceptEveryone:
        async def verify(self, username, password):
            return AuthResult(user=test_user)

    app.dependency_overrides[get_credential_verifier] = lambda: AcceptEveryone()

    response = await client.post("/api/login", json={"username": "anyone", "password": "anything"})
    assert response.status_code == 200
    assert (await client.get("/api/user/gamecount")).json() == {"gameCount": 0}


@pytest.mark.asyncio
async def test_login_store_failure(client: AsyncClient, store, monkeypatch):
    from sqlalchemy.exc import OperationalError

    async def failing_lookup(username):
        raise OperationalError("SELECT users.id", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store, "find_user_by_username", failing_lookup)
    response = await client.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert response.status_code == 500
    assert response.json() == {"detail": "Login failed"}
    assert "memequiz_session" not in response.cookies
