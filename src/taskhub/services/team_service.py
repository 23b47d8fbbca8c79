"""Team lifecycle and membership management."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.exceptions import BadRequestError, NotFoundError
from src.taskhub.core.logging import get_logger
from src.taskhub.models import Team, TeamMember, TeamRole
from src.taskhub.repositories import MembershipRepository, TeamRepository, UserRepository
from src.taskhub.schemas.team import TeamDetail, TeamMemberRead, TeamRead
from src.taskhub.services.authorization import (
    AuthorizationService,
    Permission,
    check_can_add_with_role,
    check_can_change_role,
    check_can_leave,
    check_can_remove,
)
from src.taskhub.services.base import BaseService

logger = get_logger(__name__)

ALREADY_MEMBER_MESSAGE = "User is already a member of this team"
MEMBER_NOT_FOUND_MESSAGE = "Member not found in this team"


class TeamService(BaseService):
    """Creates teams and manages who belongs to them with which role."""

    def __init__(
        self,
        team_repo: TeamRepository,
        membership_repo: MembershipRepository,
        user_repo: UserRepository,
        authz: AuthorizationService,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.team_repo = team_repo
        self.membership_repo = membership_repo
        self.user_repo = user_repo
        self.authz = authz

    async def _get_team_or_404(self, team_id: int) -> Team:
        team = await self.team_repo.get_by_id(team_id)
        if team is None:
            raise NotFoundError.for_entity("Team", team_id)
        return team

    async def _to_detail(self, team: Team) -> TeamDetail:
        rows = await self.membership_repo.list_with_users(team.id)  # type: ignore[arg-type]
        return TeamDetail(
            id=team.id,  # type: ignore[arg-type]
            name=team.name,
            description=team.description,
            created_at=team.created_at,
            members=[
                TeamMemberRead(
                    id=member.id,  # type: ignore[arg-type]
                    user_id=member.user_id,
                    user_name=user.full_name,
                    user_email=user.email,
                    role=member.role,
                    joined_at=member.joined_at,
                )
                for member, user in rows
            ],
        )

    async def create_team(self, name: str, description: str | None, user_id: int) -> TeamDetail:
        """Create a team with the caller as its owner, in a single commit."""
        if await self.user_repo.get_by_id(user_id) is None:
            raise NotFoundError.for_entity("User", user_id)

        team = Team(name=name, description=description)
        self.team_repo.add(team)
        # Flush assigns team.id for the owner membership
        await self.session.flush()

        self.membership_repo.add(
            TeamMember(
                team_id=team.id,  # type: ignore[arg-type]
                user_id=user_id,
                role=TeamRole.OWNER.value,
            )
        )
        await self._commit()

        logger.info("Team created", team_id=team.id, owner_id=user_id)
        return await self._to_detail(team)

    async def get_team(self, team_id: int, user_id: int) -> TeamDetail:
        team = await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.VIEW)
        return await self._to_detail(team)

    async def list_user_teams(self, user_id: int) -> list[TeamRead]:
        """List the teams the user belongs to, with member counts."""
        rows = await self.team_repo.list_for_user(user_id)
        return [
            TeamRead(
                id=team.id,  # type: ignore[arg-type]
                name=team.name,
                description=team.description,
                created_at=team.created_at,
                member_count=member_count,
            )
            for team, member_count in rows
        ]

    async def update_team(
        self, team_id: int, name: str, description: str | None, user_id: int
    ) -> TeamDetail:
        team = await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.UPDATE_TEAM)

        team.name = name
        team.description = description
        await self._commit()

        logger.info("Team updated", team_id=team_id)
        return await self._to_detail(team)

    async def delete_team(self, team_id: int, user_id: int) -> None:
        """Delete a team. Memberships, projects and tasks go with it."""
        team = await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.DELETE_TEAM)

        await self.team_repo.delete(team)
        await self._commit()

        logger.info("Team deleted", team_id=team_id)

    async def add_member(
        self, team_id: int, member_user_id: int, role: TeamRole, user_id: int
    ) -> None:
        """Add an existing user to the team.

        Raises:
            NotFoundError: Team or user does not exist.
            ForbiddenError: Caller is not owner/manager, or a manager tries to
                add someone with an elevated role.
            BadRequestError: User is already a member.
        """
        await self._get_team_or_404(team_id)
        actor_role = await self.authz.require(team_id, user_id, Permission.ADD_MEMBER)

        if await self.user_repo.get_by_id(member_user_id) is None:
            raise NotFoundError.for_entity("User", member_user_id)

        if await self.membership_repo.is_member(team_id, member_user_id):
            raise BadRequestError(ALREADY_MEMBER_MESSAGE)

        check_can_add_with_role(actor_role, role)

        self.membership_repo.add(
            TeamMember(team_id=team_id, user_id=member_user_id, role=role.value)
        )
        # The (team_id, user_id) unique constraint catches a concurrent add
        await self._commit(ALREADY_MEMBER_MESSAGE)

        logger.info(
            "Team member added",
            team_id=team_id,
            member_user_id=member_user_id,
            role=role.value,
        )

    async def remove_member(self, team_id: int, member_user_id: int, user_id: int) -> None:
        await self._get_team_or_404(team_id)
        actor_role = await self.authz.require(team_id, user_id, Permission.REMOVE_MEMBER)

        membership = await self.membership_repo.get_membership(team_id, member_user_id)
        if membership is None:
            raise NotFoundError(MEMBER_NOT_FOUND_MESSAGE)

        check_can_remove(actor_role, membership.role_enum)

        await self.membership_repo.delete(membership)
        await self._commit()

        logger.info("Team member removed", team_id=team_id, member_user_id=member_user_id)

    async def update_member_role(
        self, team_id: int, member_user_id: int, new_role: TeamRole, user_id: int
    ) -> None:
        await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.CHANGE_MEMBER_ROLE)

        membership = await self.membership_repo.get_membership(team_id, member_user_id)
        if membership is None:
            raise NotFoundError(MEMBER_NOT_FOUND_MESSAGE)

        check_can_change_role(membership.role_enum)

        membership.role = new_role.value
        await self._commit()

        logger.info(
            "Team member role changed",
            team_id=team_id,
            member_user_id=member_user_id,
            role=new_role.value,
        )

    async def leave_team(self, team_id: int, user_id: int) -> None:
        """Remove the caller's own membership. The sole owner cannot leave."""
        await self._get_team_or_404(team_id)

        membership = await self.membership_repo.get_membership(team_id, user_id)
        if membership is None:
            raise NotFoundError("You are not a member of this team")

        owner_count = 0
        if membership.role_enum == TeamRole.OWNER:
            owner_count = await self.membership_repo.count_by_role(team_id, TeamRole.OWNER)
        check_can_leave(membership.role_enum, owner_count)

        await self.membership_repo.delete(membership)
        await self._commit()

        logger.info("Team member left", team_id=team_id, user_id=user_id)
