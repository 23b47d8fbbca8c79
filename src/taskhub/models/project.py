"""Project model - owned by a team."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.taskhub.models.base import utc_now


class Project(SQLModel, table=True):
    """Project inside a team. Deleting it cascades to its tasks."""

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None, max_length=1000)
    team_id: int = Field(foreign_key="teams.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    deadline: datetime | None = Field(default=None, index=True)
