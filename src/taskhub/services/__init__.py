"""Service layer - business logic and transaction control."""

from src.taskhub.services.auth_service import AuthService
from src.taskhub.services.authorization import AuthorizationService, Permission
from src.taskhub.services.project_service import ProjectService
from src.taskhub.services.task_service import TaskService
from src.taskhub.services.team_service import TeamService

__all__ = [
    "AuthService",
    "AuthorizationService",
    "Permission",
    "ProjectService",
    "TaskService",
    "TeamService",
]
