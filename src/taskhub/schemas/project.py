from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.taskhub.core.validators import blank_to_none, require_future
from src.taskhub.schemas.task import TaskRead


class ProjectCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    deadline: datetime | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime | None) -> datetime | None:
        return require_future(v, "Deadline")


class ProjectUpdate(ProjectCreate):
    """Full replacement of a project's editable fields."""


class ProjectRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    team_id: int
    team_name: str
    created_at: datetime
    deadline: datetime | None = None
    task_count: int = 0


class ProjectDetail(BaseModel):
    id: int
    name: str
    description: str | None = None
    team_id: int
    team_name: str
    created_at: datetime
    deadline: datetime | None = None
    tasks: list[TaskRead] = []
