"""Task model - owned by a project."""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.taskhub.models.base import utc_now
from src.taskhub.models.enums import TaskPriority, TaskStatus


class Task(SQLModel, table=True):
    """Task inside a project.

    Deleting the project deletes the task; deleting the assignee only
    unassigns it.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_project_id_status", "project_id", "status"),
        Index("ix_tasks_project_id_priority", "project_id", "priority"),
        Index("ix_tasks_project_id_assigned_to_user_id", "project_id", "assigned_to_user_id"),
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: str = Field(default=TaskStatus.TODO.value, max_length=20)
    priority: str = Field(default=TaskPriority.MEDIUM.value, max_length=20)
    due_date: datetime | None = Field(default=None, index=True)
    assigned_to_user_id: int | None = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL"
    )
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    completed_at: datetime | None = Field(default=None)

    @property
    def status_enum(self) -> TaskStatus:
        return TaskStatus(self.status)

    def apply_status(self, new_status: TaskStatus, now: datetime | None = None) -> None:
        """Move to new_status, keeping completed_at set exactly while the task is done.

        Re-entering DONE keeps the original completion time.
        """
        self.status = new_status.value
        if new_status == TaskStatus.DONE:
            if self.completed_at is None:
                self.completed_at = now or utc_now()
        else:
            self.completed_at = None
