"""Repository layer - data access abstraction."""

from src.taskhub.repositories.base import BaseRepository
from src.taskhub.repositories.membership import MembershipRepository
from src.taskhub.repositories.project import ProjectRepository
from src.taskhub.repositories.task import TaskRepository, TaskRow
from src.taskhub.repositories.team import TeamRepository
from src.taskhub.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    # Identity & membership
    "MembershipRepository",
    "TeamRepository",
    "UserRepository",
    # Work items
    "ProjectRepository",
    "TaskRepository",
    "TaskRow",
]
