"""Test helper functions for common data creation patterns."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.security import create_access_token
from src.taskhub.models import Project, Task, Team, TeamMember, TeamRole, User
from tests.factories import (
    ProjectFactory,
    TaskFactory,
    TeamFactory,
    TeamMemberFactory,
    UserFactory,
)


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header carrying a freshly issued token for user."""
    token, _ = create_access_token(user.id, user.email, user.full_name, user.role)
    return {"Authorization": f"Bearer {token}"}


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    """Create and commit a user."""
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def add_member(
    session: AsyncSession, team: Team, user: User, role: TeamRole = TeamRole.MEMBER
) -> TeamMember:
    """Add user to team with role and commit."""
    membership = TeamMemberFactory.build(team_id=team.id, user_id=user.id, role=role.value)
    session.add(membership)
    await session.commit()
    await session.refresh(membership)
    return membership


async def create_team(session: AsyncSession, owner: User, **team_kwargs) -> Team:
    """Create a team owned by owner.

    Args:
        session: Database session
        owner: User that becomes the team's owner
        **team_kwargs: Additional args passed to TeamFactory

    Returns:
        The committed team
    """
    team = TeamFactory.build(**team_kwargs)
    session.add(team)
    await session.commit()
    await session.refresh(team)
    await add_member(session, team, owner, TeamRole.OWNER)
    return team


async def create_project(session: AsyncSession, team: Team, **project_kwargs) -> Project:
    project = ProjectFactory.build(team_id=team.id, **project_kwargs)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project


async def create_task(session: AsyncSession, project: Project, **task_kwargs) -> Task:
    task = TaskFactory.build(project_id=project.id, **task_kwargs)
    session.add(task)
    await session.commit()
    await session.refresh(task)
    return task
