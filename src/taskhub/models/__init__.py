"""Model exports.

Import from here: `from src.taskhub.models import User, Team, Task`
"""

from src.taskhub.models.enums import (
    PRIORITY_RANK,
    TaskPriority,
    TaskStatus,
    TeamRole,
    UserRole,
)
from src.taskhub.models.project import Project
from src.taskhub.models.task import Task
from src.taskhub.models.team import Team, TeamMember
from src.taskhub.models.user import User

__all__ = [
    # Enums
    "PRIORITY_RANK",
    "TaskPriority",
    "TaskStatus",
    "TeamRole",
    "UserRole",
    # Models
    "Project",
    "Task",
    "Team",
    "TeamMember",
    "User",
]
