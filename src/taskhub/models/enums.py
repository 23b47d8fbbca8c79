"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """System-wide user role."""

    ADMIN = "admin"
    USER = "user"


class TeamRole(str, Enum):
    """Role of a user within a team. Owner > Manager > Member in privilege."""

    OWNER = "owner"
    MANAGER = "manager"
    MEMBER = "member"


class TaskStatus(str, Enum):
    """Workflow state of a task. Every pairwise transition is allowed."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    DONE = "done"


class TaskPriority(str, Enum):
    """Task priority, ordered by PRIORITY_RANK."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


PRIORITY_RANK: dict[str, int] = {
    TaskPriority.LOW.value: 1,
    TaskPriority.MEDIUM.value: 2,
    TaskPriority.HIGH.value: 3,
    TaskPriority.URGENT.value: 4,
}
