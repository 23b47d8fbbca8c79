"""Repository for TeamMember entity."""

from sqlalchemy import func
from sqlmodel import select

from src.taskhub.models import TeamMember, TeamRole, User
from src.taskhub.repositories.base import BaseRepository


class MembershipRepository(BaseRepository[TeamMember]):
    """Repository for user-team memberships."""

    model = TeamMember

    async def get_membership(self, team_id: int, user_id: int) -> TeamMember | None:
        """Get membership for a user in a team."""
        result = await self.session.execute(
            select(TeamMember).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_role(self, team_id: int, user_id: int) -> TeamRole | None:
        """Get the user's role in a team, or None if not a member."""
        result = await self.session.execute(
            select(TeamMember.role).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id == user_id,
            )
        )
        role = result.scalar_one_or_none()
        return TeamRole(role) if role is not None else None

    async def is_member(self, team_id: int, user_id: int) -> bool:
        return await self.get_role(team_id, user_id) is not None

    async def count_by_role(self, team_id: int, role: TeamRole) -> int:
        """Count members of a team holding the given role."""
        result = await self.session.execute(
            select(func.count(TeamMember.id)).where(  # type: ignore[arg-type]
                TeamMember.team_id == team_id,
                TeamMember.role == role.value,
            )
        )
        return result.scalar_one()

    async def list_with_users(self, team_id: int) -> list[tuple[TeamMember, User]]:
        """List a team's memberships joined with their users, oldest first."""
        result = await self.session.execute(
            select(TeamMember, User)
            .join(User, User.id == TeamMember.user_id)  # type: ignore[arg-type]
            .where(TeamMember.team_id == team_id)
            .order_by(TeamMember.joined_at, TeamMember.id)  # type: ignore[arg-type]
        )
        return [(member, user) for member, user in result.all()]
