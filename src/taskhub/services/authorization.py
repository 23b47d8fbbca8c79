"""Team-scoped authorization.

Every check reads the caller's role from the membership table at call time.
Callers load the target entity first so a missing entity reports NotFound
before any permission error.
"""

from dataclasses import dataclass
from enum import Enum

from src.taskhub.core.exceptions import BadRequestError, ForbiddenError
from src.taskhub.models import TeamRole
from src.taskhub.repositories import MembershipRepository

NOT_A_MEMBER_MESSAGE = "You are not a member of this team"

ALL_ROLES = frozenset(TeamRole)
OWNER_OR_MANAGER = frozenset({TeamRole.OWNER, TeamRole.MANAGER})
OWNER_ONLY = frozenset({TeamRole.OWNER})


class Permission(str, Enum):
    VIEW = "view"
    UPDATE_TEAM = "update_team"
    DELETE_TEAM = "delete_team"
    ADD_MEMBER = "add_member"
    REMOVE_MEMBER = "remove_member"
    CHANGE_MEMBER_ROLE = "change_member_role"
    CREATE_PROJECT = "create_project"
    UPDATE_PROJECT = "update_project"
    DELETE_PROJECT = "delete_project"
    MANAGE_TASKS = "manage_tasks"
    DELETE_TASK = "delete_task"


@dataclass(frozen=True)
class PermissionRule:
    roles: frozenset[TeamRole]
    denied_message: str
    non_member_message: str = NOT_A_MEMBER_MESSAGE


PERMISSIONS: dict[Permission, PermissionRule] = {
    Permission.VIEW: PermissionRule(ALL_ROLES, NOT_A_MEMBER_MESSAGE),
    Permission.UPDATE_TEAM: PermissionRule(
        OWNER_OR_MANAGER, "Only owners and managers can update teams"
    ),
    Permission.DELETE_TEAM: PermissionRule(
        OWNER_ONLY,
        "Only team owners can delete teams",
        "Only team owners can delete teams",
    ),
    Permission.ADD_MEMBER: PermissionRule(
        OWNER_OR_MANAGER,
        "Only owners and managers can add members",
        "Only owners and managers can add members",
    ),
    Permission.REMOVE_MEMBER: PermissionRule(
        OWNER_OR_MANAGER,
        "Only owners and managers can remove members",
        "Only owners and managers can remove members",
    ),
    Permission.CHANGE_MEMBER_ROLE: PermissionRule(
        OWNER_ONLY,
        "Only team owners can change member roles",
        "Only team owners can change member roles",
    ),
    Permission.CREATE_PROJECT: PermissionRule(
        ALL_ROLES, "", "You must be a team member to create projects"
    ),
    Permission.UPDATE_PROJECT: PermissionRule(
        OWNER_OR_MANAGER, "Only owners and managers can update projects"
    ),
    Permission.DELETE_PROJECT: PermissionRule(
        OWNER_OR_MANAGER, "Only owners and managers can delete projects"
    ),
    Permission.MANAGE_TASKS: PermissionRule(
        ALL_ROLES, "", "You must be a team member to manage tasks"
    ),
    Permission.DELETE_TASK: PermissionRule(
        OWNER_OR_MANAGER,
        "Only owners and managers can delete tasks",
        "Only owners and managers can delete tasks",
    ),
}


def check_permission(role: TeamRole | None, permission: Permission) -> TeamRole:
    """Check a role against the permission table.

    Raises:
        ForbiddenError: If role is None or not allowed for the permission.
    """
    rule = PERMISSIONS[permission]
    if role is None:
        raise ForbiddenError(rule.non_member_message)
    if role not in rule.roles:
        raise ForbiddenError(rule.denied_message)
    return role


def check_can_add_with_role(actor_role: TeamRole, new_role: TeamRole) -> None:
    """Only owners may add members with an elevated role."""
    if new_role != TeamRole.MEMBER and actor_role != TeamRole.OWNER:
        raise ForbiddenError(f"Only owners can add {new_role.value}s")


def check_can_remove(actor_role: TeamRole, target_role: TeamRole) -> None:
    """Owners are never removable by others; managers cannot remove managers."""
    if target_role == TeamRole.OWNER:
        raise BadRequestError("Cannot remove team owner. Owner must leave team themselves.")
    if actor_role == TeamRole.MANAGER and target_role == TeamRole.MANAGER:
        raise ForbiddenError("Managers cannot remove other managers")


def check_can_change_role(target_role: TeamRole) -> None:
    if target_role == TeamRole.OWNER:
        raise BadRequestError("Cannot change owner's role. Use transfer ownership instead.")


def check_can_leave(role: TeamRole, owner_count: int) -> None:
    """The last owner cannot leave; the team would be orphaned."""
    if role == TeamRole.OWNER and owner_count <= 1:
        raise BadRequestError(
            "Cannot leave team. You are the only owner. "
            "Transfer ownership first or delete the team."
        )


class AuthorizationService:
    """Resolves a caller's team role and enforces the permission table."""

    def __init__(self, membership_repo: MembershipRepository):
        self.membership_repo = membership_repo

    async def role_of(self, team_id: int, user_id: int) -> TeamRole | None:
        """Get the user's role in the team, or None if not a member."""
        return await self.membership_repo.get_role(team_id, user_id)

    async def require(self, team_id: int, user_id: int, permission: Permission) -> TeamRole:
        """Return the caller's role if it grants permission, else raise ForbiddenError."""
        role = await self.role_of(team_id, user_id)
        return check_permission(role, permission)
