from datetime import datetime
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.taskhub.core.validators import blank_to_none, require_future
from src.taskhub.models import TaskPriority, TaskStatus
from src.taskhub.models.base import to_naive_utc

DEFAULT_PAGE_SIZE: Final[int] = 20
MAX_PAGE_SIZE: Final[int] = 100
# Keeps (page - 1) * page_size inside a signed 64-bit OFFSET
MAX_PAGE: Final[int] = 1_000_000_000


class TaskCreate(BaseModel):
    title: str = Field(min_length=2, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None
    assigned_to_user_id: int | None = Field(default=None, gt=0)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime | None) -> datetime | None:
        return require_future(v, "Due date")


class TaskUpdate(BaseModel):
    """Full replacement of a task's editable fields. Status and assignee have their own routes."""

    title: str = Field(min_length=2, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime | None) -> datetime | None:
        return require_future(v, "Due date")


class AssignTaskRequest(BaseModel):
    user_id: int = Field(gt=0)


class UpdateTaskStatusRequest(BaseModel):
    status: TaskStatus


class TaskRead(BaseModel):
    id: int
    title: str
    description: str | None = None
    status: str
    priority: str
    due_date: datetime | None = None
    assigned_to_user_id: int | None = None
    assigned_to_user_name: str | None = None
    project_id: int
    project_name: str
    created_at: datetime
    completed_at: datetime | None = None


class TaskQueryParams(BaseModel):
    """Filter, sort and paging options for the paged task listing.

    Out-of-range paging values are clamped rather than rejected:
    page is forced into [1, MAX_PAGE] and page_size is forced into [1, MAX_PAGE_SIZE].
    """

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to_user_id: int | None = None
    due_date_from: datetime | None = None
    due_date_to: datetime | None = None
    search_term: str | None = None
    sort_by: str | None = Field(
        default=None,
        description="One of: priority, dueDate, createdAt (case-insensitive). Defaults to createdAt.",
    )
    sort_descending: bool = False
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page")
    @classmethod
    def clamp_page(cls, v: int) -> int:
        return min(max(v, 1), MAX_PAGE)

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v: int) -> int:
        return min(max(v, 1), MAX_PAGE_SIZE)

    @field_validator("due_date_from", "due_date_to")
    @classmethod
    def normalize_due_date_bounds(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v) if v is not None else None

    @field_validator("search_term")
    @classmethod
    def normalize_search_term(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
