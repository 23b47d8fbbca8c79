"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database (foreign keys enforced) that
the application engine is pointed at. Uses polyfactory for test data.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import src.taskhub.models  # noqa: F401 - registers tables on SQLModel.metadata
from src.taskhub.core.db import create_engine_from_url
from src.taskhub.core.db import engine as engine_module
from src.taskhub.main import create_app
from src.taskhub.models import Team, TeamRole, User
from tests.helpers import add_member, create_team, create_user


@pytest.fixture
async def engine(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Create an isolated database and make it the application's engine."""
    test_engine = create_engine_from_url(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    monkeypatch.setattr(engine_module, "_engine", test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    Tests must call `await session.commit()` to make changes visible to the app.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client driving the ASGI app against the test database."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def owner(db_session: AsyncSession) -> User:
    return await create_user(db_session, full_name="Olivia Owner")


@pytest.fixture
async def manager(db_session: AsyncSession) -> User:
    return await create_user(db_session, full_name="Max Manager")


@pytest.fixture
async def member(db_session: AsyncSession) -> User:
    return await create_user(db_session, full_name="Mia Member")


@pytest.fixture
async def outsider(db_session: AsyncSession) -> User:
    return await create_user(db_session, full_name="Oscar Outsider")


@pytest.fixture
async def team(
    db_session: AsyncSession, owner: User, manager: User, member: User
) -> Team:
    """A team with one owner, one manager and one plain member."""
    team = await create_team(db_session, owner, name="Core Team")
    await add_member(db_session, team, manager, TeamRole.MANAGER)
    await add_member(db_session, team, member, TeamRole.MEMBER)
    return team
