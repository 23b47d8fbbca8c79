"""FastAPI dependency injection definitions."""

# Auth
from src.taskhub.api.dependencies.auth import CurrentUser, get_current_user

# Database
from src.taskhub.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.taskhub.api.dependencies.repositories import (
    MembershipRepo,
    ProjectRepo,
    TaskRepo,
    TeamRepo,
    UserRepo,
)

# Services
from src.taskhub.api.dependencies.services import (
    AuthorizationServiceDep,
    AuthServiceDep,
    ProjectServiceDep,
    TaskServiceDep,
    TeamServiceDep,
    get_auth_service,
    get_project_service,
    get_task_service,
    get_team_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Repositories
    "MembershipRepo",
    "ProjectRepo",
    "TaskRepo",
    "TeamRepo",
    "UserRepo",
    # Services
    "AuthServiceDep",
    "AuthorizationServiceDep",
    "ProjectServiceDep",
    "TaskServiceDep",
    "TeamServiceDep",
    "get_auth_service",
    "get_project_service",
    "get_task_service",
    "get_team_service",
]
