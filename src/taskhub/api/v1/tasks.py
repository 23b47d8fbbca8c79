"""Task endpoints - nested under their project."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.taskhub.api.dependencies import CurrentUser, TaskServiceDep
from src.taskhub.schemas.pagination import PagedResponse
from src.taskhub.schemas.task import (
    AssignTaskRequest,
    TaskCreate,
    TaskQueryParams,
    TaskRead,
    TaskUpdate,
    UpdateTaskStatusRequest,
)

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])

_TASK_ERRORS: dict[int | str, dict[str, str]] = {
    403: {"description": "Not a member of the project's team"},
    404: {"description": "Project or task not found"},
}


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={**_TASK_ERRORS, 400: {"description": "Assignee is not a team member"}},
)
async def create_task(
    project_id: int, data: TaskCreate, user: CurrentUser, service: TaskServiceDep
) -> TaskRead:
    return await service.create_task(project_id, data, user.id)  # type: ignore[arg-type]


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List project tasks",
    responses=_TASK_ERRORS,
)
async def list_tasks(
    project_id: int, user: CurrentUser, service: TaskServiceDep
) -> list[TaskRead]:
    return await service.list_project_tasks(project_id, user.id)  # type: ignore[arg-type]


@router.get(
    "/paged",
    response_model=PagedResponse[TaskRead],
    summary="Query project tasks",
    description=(
        "Filter by status, priority, assignee, due date range and search term; "
        "sort by priority, dueDate or createdAt; page with page/page_size (max 100)."
    ),
    responses=_TASK_ERRORS,
)
async def query_tasks(
    project_id: int,
    params: Annotated[TaskQueryParams, Query()],
    user: CurrentUser,
    service: TaskServiceDep,
) -> PagedResponse[TaskRead]:
    return await service.list_tasks_paged(project_id, params, user.id)  # type: ignore[arg-type]


@router.get("/{task_id}", response_model=TaskRead, summary="Get task", responses=_TASK_ERRORS)
async def get_task(
    project_id: int, task_id: int, user: CurrentUser, service: TaskServiceDep
) -> TaskRead:
    return await service.get_task(task_id, user.id, project_id=project_id)  # type: ignore[arg-type]


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update task",
    description="Replace title, description, priority and due date.",
    responses=_TASK_ERRORS,
)
async def update_task(
    project_id: int,
    task_id: int,
    data: TaskUpdate,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    return await service.update_task(task_id, data, user.id, project_id=project_id)  # type: ignore[arg-type]


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete task",
    description="Owners and managers only.",
    responses=_TASK_ERRORS,
)
async def delete_task(
    project_id: int, task_id: int, user: CurrentUser, service: TaskServiceDep
) -> None:
    await service.delete_task(task_id, user.id, project_id=project_id)  # type: ignore[arg-type]


@router.post(
    "/{task_id}/assign",
    response_model=TaskRead,
    summary="Assign task",
    responses={**_TASK_ERRORS, 400: {"description": "Assignee is not a team member"}},
)
async def assign_task(
    project_id: int,
    task_id: int,
    data: AssignTaskRequest,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    return await service.assign_task(
        task_id, data.user_id, user.id, project_id=project_id  # type: ignore[arg-type]
    )


@router.post(
    "/{task_id}/unassign",
    response_model=TaskRead,
    summary="Unassign task",
    responses=_TASK_ERRORS,
)
async def unassign_task(
    project_id: int, task_id: int, user: CurrentUser, service: TaskServiceDep
) -> TaskRead:
    return await service.unassign_task(task_id, user.id, project_id=project_id)  # type: ignore[arg-type]


@router.put(
    "/{task_id}/status",
    response_model=TaskRead,
    summary="Change task status",
    description="Any status may follow any other. Entering done stamps completed_at; leaving it clears it.",
    responses=_TASK_ERRORS,
)
async def update_task_status(
    project_id: int,
    task_id: int,
    data: UpdateTaskStatusRequest,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    return await service.update_task_status(
        task_id, data.status, user.id, project_id=project_id  # type: ignore[arg-type]
    )
