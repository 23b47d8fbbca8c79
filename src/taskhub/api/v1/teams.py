"""Team endpoints - team CRUD and membership management."""

from fastapi import APIRouter, status

from src.taskhub.api.dependencies import CurrentUser, TeamServiceDep
from src.taskhub.schemas.team import (
    AddMemberRequest,
    TeamCreate,
    TeamDetail,
    TeamRead,
    TeamUpdate,
    UpdateMemberRoleRequest,
)

router = APIRouter(prefix="/teams", tags=["teams"])

_MEMBER_ERRORS: dict[int | str, dict[str, str]] = {
    403: {"description": "Caller lacks the required team role"},
    404: {"description": "Team, user or membership not found"},
}


@router.post(
    "",
    response_model=TeamDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create team",
    description="Create a team. The caller becomes its owner.",
)
async def create_team(data: TeamCreate, user: CurrentUser, service: TeamServiceDep) -> TeamDetail:
    return await service.create_team(data.name, data.description, user.id)  # type: ignore[arg-type]


@router.get(
    "",
    response_model=list[TeamRead],
    summary="List my teams",
    description="Teams the caller belongs to, with member counts.",
)
async def list_my_teams(user: CurrentUser, service: TeamServiceDep) -> list[TeamRead]:
    return await service.list_user_teams(user.id)  # type: ignore[arg-type]


@router.get(
    "/{team_id}",
    response_model=TeamDetail,
    summary="Get team",
    responses={
        403: {"description": "Not a member of this team"},
        404: {"description": "Team not found"},
    },
)
async def get_team(team_id: int, user: CurrentUser, service: TeamServiceDep) -> TeamDetail:
    return await service.get_team(team_id, user.id)  # type: ignore[arg-type]


@router.put(
    "/{team_id}",
    response_model=TeamDetail,
    summary="Update team",
    description="Owners and managers only.",
    responses=_MEMBER_ERRORS,
)
async def update_team(
    team_id: int, data: TeamUpdate, user: CurrentUser, service: TeamServiceDep
) -> TeamDetail:
    return await service.update_team(team_id, data.name, data.description, user.id)  # type: ignore[arg-type]


@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete team",
    description="Owners only. Deletes the team's memberships, projects and tasks.",
    responses=_MEMBER_ERRORS,
)
async def delete_team(team_id: int, user: CurrentUser, service: TeamServiceDep) -> None:
    await service.delete_team(team_id, user.id)  # type: ignore[arg-type]


@router.post(
    "/{team_id}/members",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Add member",
    description="Owners and managers may add members; only owners may add managers or owners.",
    responses={**_MEMBER_ERRORS, 400: {"description": "User is already a member"}},
)
async def add_member(
    team_id: int, data: AddMemberRequest, user: CurrentUser, service: TeamServiceDep
) -> None:
    await service.add_member(team_id, data.user_id, data.role, user.id)  # type: ignore[arg-type]


@router.delete(
    "/{team_id}/members/{member_user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove member",
    responses={**_MEMBER_ERRORS, 400: {"description": "Owners cannot be removed"}},
)
async def remove_member(
    team_id: int, member_user_id: int, user: CurrentUser, service: TeamServiceDep
) -> None:
    await service.remove_member(team_id, member_user_id, user.id)  # type: ignore[arg-type]


@router.put(
    "/{team_id}/members/{member_user_id}/role",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change member role",
    description="Owners only. An owner's own role cannot be changed here.",
    responses={**_MEMBER_ERRORS, 400: {"description": "Target is an owner"}},
)
async def update_member_role(
    team_id: int,
    member_user_id: int,
    data: UpdateMemberRoleRequest,
    user: CurrentUser,
    service: TeamServiceDep,
) -> None:
    await service.update_member_role(team_id, member_user_id, data.role, user.id)  # type: ignore[arg-type]


@router.post(
    "/{team_id}/leave",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Leave team",
    responses={
        400: {"description": "Caller is the only owner"},
        404: {"description": "Team not found or caller is not a member"},
    },
)
async def leave_team(team_id: int, user: CurrentUser, service: TeamServiceDep) -> None:
    await service.leave_team(team_id, user.id)  # type: ignore[arg-type]
