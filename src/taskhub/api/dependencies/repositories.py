"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskhub.api.dependencies.db import DBSession
from src.taskhub.repositories import (
    MembershipRepository,
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_team_repository(session: DBSession) -> TeamRepository:
    return TeamRepository(session)


def get_membership_repository(session: DBSession) -> MembershipRepository:
    return MembershipRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_task_repository(session: DBSession) -> TaskRepository:
    return TaskRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
TeamRepo = Annotated[TeamRepository, Depends(get_team_repository)]
MembershipRepo = Annotated[MembershipRepository, Depends(get_membership_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
TaskRepo = Annotated[TaskRepository, Depends(get_task_repository)]
