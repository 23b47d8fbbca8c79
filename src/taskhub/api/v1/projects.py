"""Project endpoints - nested under their team."""

from fastapi import APIRouter, status

from src.taskhub.api.dependencies import CurrentUser, ProjectServiceDep
from src.taskhub.schemas.project import ProjectCreate, ProjectDetail, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/teams/{team_id}/projects", tags=["projects"])


@router.post(
    "",
    response_model=ProjectDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        403: {"description": "Not a member of this team"},
        404: {"description": "Team not found"},
    },
)
async def create_project(
    team_id: int, data: ProjectCreate, user: CurrentUser, service: ProjectServiceDep
) -> ProjectDetail:
    return await service.create_project(
        team_id, data.name, data.description, data.deadline, user.id  # type: ignore[arg-type]
    )


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List team projects",
    description="All projects of the team, with task counts.",
)
async def list_projects(
    team_id: int, user: CurrentUser, service: ProjectServiceDep
) -> list[ProjectRead]:
    return await service.list_team_projects(team_id, user.id)  # type: ignore[arg-type]


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Get project",
    description="Project details including its tasks.",
    responses={404: {"description": "Project not found in this team"}},
)
async def get_project(
    team_id: int, project_id: int, user: CurrentUser, service: ProjectServiceDep
) -> ProjectDetail:
    return await service.get_project(project_id, user.id, team_id=team_id)  # type: ignore[arg-type]


@router.put(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Update project",
    description="Owners and managers only.",
)
async def update_project(
    team_id: int,
    project_id: int,
    data: ProjectUpdate,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectDetail:
    return await service.update_project(
        project_id,
        data.name,
        data.description,
        data.deadline,
        user.id,  # type: ignore[arg-type]
        team_id=team_id,
    )


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Owners and managers only. Deletes the project's tasks.",
)
async def delete_project(
    team_id: int, project_id: int, user: CurrentUser, service: ProjectServiceDep
) -> None:
    await service.delete_project(project_id, user.id, team_id=team_id)  # type: ignore[arg-type]
