"""Request and response schemas."""

from src.taskhub.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserRead
from src.taskhub.schemas.pagination import PagedResponse, total_pages_for
from src.taskhub.schemas.project import ProjectCreate, ProjectDetail, ProjectRead, ProjectUpdate
from src.taskhub.schemas.task import (
    AssignTaskRequest,
    TaskCreate,
    TaskQueryParams,
    TaskRead,
    TaskUpdate,
    UpdateTaskStatusRequest,
)
from src.taskhub.schemas.team import (
    AddMemberRequest,
    TeamCreate,
    TeamDetail,
    TeamMemberRead,
    TeamRead,
    TeamUpdate,
    UpdateMemberRoleRequest,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserRead",
    # Pagination
    "PagedResponse",
    "total_pages_for",
    # Projects
    "ProjectCreate",
    "ProjectDetail",
    "ProjectRead",
    "ProjectUpdate",
    # Tasks
    "AssignTaskRequest",
    "TaskCreate",
    "TaskQueryParams",
    "TaskRead",
    "TaskUpdate",
    "UpdateTaskStatusRequest",
    # Teams
    "AddMemberRequest",
    "TeamCreate",
    "TeamDetail",
    "TeamMemberRead",
    "TeamRead",
    "TeamUpdate",
    "UpdateMemberRoleRequest",
]
