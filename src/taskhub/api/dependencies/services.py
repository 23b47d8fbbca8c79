"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskhub.api.dependencies.db import DBSession
from src.taskhub.api.dependencies.repositories import (
    MembershipRepo,
    ProjectRepo,
    TaskRepo,
    TeamRepo,
    UserRepo,
)
from src.taskhub.services import (
    AuthorizationService,
    AuthService,
    ProjectService,
    TaskService,
    TeamService,
)


def get_authorization_service(membership_repo: MembershipRepo) -> AuthorizationService:
    return AuthorizationService(membership_repo)


AuthorizationServiceDep = Annotated[AuthorizationService, Depends(get_authorization_service)]


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_team_service(
    team_repo: TeamRepo,
    membership_repo: MembershipRepo,
    user_repo: UserRepo,
    authz: AuthorizationServiceDep,
    session: DBSession,
) -> TeamService:
    return TeamService(team_repo, membership_repo, user_repo, authz, session)


def get_project_service(
    project_repo: ProjectRepo,
    team_repo: TeamRepo,
    task_repo: TaskRepo,
    authz: AuthorizationServiceDep,
    session: DBSession,
) -> ProjectService:
    return ProjectService(project_repo, team_repo, task_repo, authz, session)


def get_task_service(
    task_repo: TaskRepo,
    project_repo: ProjectRepo,
    membership_repo: MembershipRepo,
    authz: AuthorizationServiceDep,
    session: DBSession,
) -> TaskService:
    return TaskService(task_repo, project_repo, membership_repo, authz, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
TeamServiceDep = Annotated[TeamService, Depends(get_team_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
