"""Repository for Team entity."""

from sqlalchemy import func
from sqlalchemy.orm import aliased
from sqlmodel import select

from src.taskhub.models import Team, TeamMember
from src.taskhub.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for teams."""

    model = Team

    async def list_for_user(self, user_id: int) -> list[tuple[Team, int]]:
        """List teams the user belongs to, each with its member count.

        Returns:
            List of (team, member_count) ordered by creation time.
        """
        counted = aliased(TeamMember)
        member_count = (
            select(func.count(counted.id))
            .where(counted.team_id == Team.id)
            .correlate(Team)
            .scalar_subquery()
        )
        result = await self.session.execute(
            select(Team, member_count)
            .join(TeamMember, TeamMember.team_id == Team.id)  # type: ignore[arg-type]
            .where(TeamMember.user_id == user_id)
            .order_by(Team.created_at, Team.id)  # type: ignore[arg-type]
        )
        return [(team, count) for team, count in result.all()]
