"""Project and task factories for test data generation."""

from polyfactory import Use

from src.taskhub.models import Project, Task, TaskPriority, TaskStatus
from tests.factories.base import BaseFactory, short_id, utc_now


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    id = None
    name = Use(lambda: f"Project {short_id()}")
    description = None
    team_id = None
    created_at = Use(utc_now)
    deadline = None


class TaskFactory(BaseFactory):
    """Factory for generating Task test data."""

    __model__ = Task

    id = None
    title = Use(lambda: f"Task {short_id()}")
    description = None
    status = TaskStatus.TODO.value
    priority = TaskPriority.MEDIUM.value
    due_date = None
    assigned_to_user_id = None
    project_id = None
    created_at = Use(utc_now)
    completed_at = None

    @classmethod
    def done(cls, **kwargs):
        """Create a completed task."""
        return cls.build(
            status=TaskStatus.DONE.value,
            completed_at=kwargs.pop("completed_at", utc_now()),
            **kwargs,
        )
