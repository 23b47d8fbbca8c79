"""Tests for authentication endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.security import resolve_token
from src.taskhub.models import User
from tests.factories import DEFAULT_TEST_PASSWORD
from tests.helpers import auth_headers, create_user

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


def _register_payload(email: str = "jane@example.com", **overrides) -> dict:
    payload = {
        "email": email,
        "password": "secret123",
        "confirm_password": "secret123",
        "full_name": "Jane Doe",
    }
    payload.update(overrides)
    return payload


class TestRegistration:
    async def test_register_returns_token_for_new_user(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/auth/register", json=_register_payload())

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "jane@example.com"
        assert data["full_name"] == "Jane Doe"
        assert data["role"] == "user"
        assert data["token_type"] == "bearer"
        assert resolve_token(data["token"]) == data["user_id"]

    async def test_register_duplicate_email_fails(self, client: AsyncClient) -> None:
        first = await client.post("/api/v1/auth/register", json=_register_payload())
        assert first.status_code == 201

        response = await client.post(
            "/api/v1/auth/register", json=_register_payload(full_name="Someone Else")
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    async def test_register_password_mismatch_fails(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/register",
            json=_register_payload(confirm_password="different1"),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"password": "12345", "confirm_password": "12345"},
            {"full_name": "J"},
        ],
    )
    async def test_register_invalid_input_fails(
        self, client: AsyncClient, overrides: dict
    ) -> None:
        response = await client.post("/api/v1/auth/register", json=_register_payload(**overrides))

        assert response.status_code == 400
        assert response.json()["errors"]


class TestLogin:
    async def test_login_success_sets_last_login(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await create_user(db_session, email="login@example.com")
        assert user.last_login_at is None

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == user.id
        assert resolve_token(data["token"]) == user.id

        refreshed = await db_session.get(User, user.id, populate_existing=True)
        assert refreshed is not None
        assert refreshed.last_login_at is not None

    async def test_login_wrong_password(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_user(db_session, email="login@example.com")

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_login_unknown_email_same_error(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "whatever"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"


class TestCurrentUser:
    async def test_me_returns_user(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await create_user(db_session, full_name="Current User")

        response = await client.get("/api/v1/auth/me", headers=auth_headers(user))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == user.id
        assert data["full_name"] == "Current User"
        assert "hashed_password" not in data

    async def test_missing_token_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401

    async def test_garbage_token_rejected(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_protected_routes_require_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/teams")

        assert response.status_code == 401
