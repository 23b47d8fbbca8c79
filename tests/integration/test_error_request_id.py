"""Tests for request_id and the error body shape."""

from collections.abc import AsyncGenerator, Generator

import pytest
import structlog
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from structlog.testing import CapturingLogger

from src.taskhub.core.exceptions import INTERNAL_ERROR_MESSAGE
from src.taskhub.main import create_app
from src.taskhub.services import TeamService
from tests.helpers import auth_headers, create_user

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def tolerant_client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Client that returns 500 responses instead of re-raising app errors."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client


async def test_not_found_route_includes_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404
    data = response.json()
    assert "message" in data
    assert data["request_id"] == response.headers["x-request-id"]


async def test_app_error_includes_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")

    assert response.status_code == 401
    data = response.json()
    assert data["message"] == "Missing or invalid authorization header"
    assert data["request_id"] == response.headers["x-request-id"]


async def test_validation_error_lists_fields(client: AsyncClient) -> None:
    response = await client.post("/api/v1/auth/login", json={"email": "nope"})

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Validation failed"
    fields = {error["field"] for error in data["errors"]}
    assert fields == {"email", "password"}


async def test_incoming_request_id_is_propagated(client: AsyncClient) -> None:
    request_id = "0f4c1c7e-2b9a-4d53-a3f0-c6a1d2e3f4a5"

    response = await client.get("/api/v1/auth/me", headers={"X-Request-ID": request_id})

    assert response.headers["x-request-id"] == request_id
    assert response.json()["request_id"] == request_id


async def test_unexpected_error_is_generic_500(
    tolerant_client: AsyncClient,
    db_session: AsyncSession,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    user = await create_user(db_session)

    async def _boom(self, user_id: int):
        raise RuntimeError("database exploded with secret details")

    monkeypatch.setattr(TeamService, "list_user_teams", _boom)

    response = await tolerant_client.get("/api/v1/teams", headers=auth_headers(user))

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == INTERNAL_ERROR_MESSAGE
    assert "secret" not in response.text
    assert "request_id" in data


@pytest.fixture
def captured_logs() -> Generator[CapturingLogger]:
    """Route structlog output, with contextvars merged, into a CapturingLogger."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )
    yield cap_logger
    structlog.configure(**old_config)


async def test_unhandled_error_log_keeps_request_fields(
    tolerant_client: AsyncClient,
    db_session: AsyncSession,
    monkeypatch: pytest.MonkeyPatch,
    captured_logs: CapturingLogger,
) -> None:
    user = await create_user(db_session)

    async def _boom(self, user_id: int):
        raise RuntimeError("boom")

    monkeypatch.setattr(TeamService, "list_user_teams", _boom)

    response = await tolerant_client.get("/api/v1/teams", headers=auth_headers(user))

    assert response.status_code == 500
    unhandled = [
        call.kwargs for call in captured_logs.calls
        if call.kwargs.get("event") == "Unhandled exception"
    ]
    assert len(unhandled) == 1
    assert unhandled[0]["request_id"] == response.json()["request_id"]
    assert unhandled[0]["method"] == "GET"
    assert unhandled[0]["path"] == "/api/v1/teams"
