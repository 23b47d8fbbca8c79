"""Repository for Project entity."""

from sqlalchemy import func
from sqlmodel import select

from src.taskhub.models import Project, Task
from src.taskhub.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects."""

    model = Project

    async def list_for_team(self, team_id: int) -> list[tuple[Project, int]]:
        """List a team's projects with their task counts.

        Returns:
            List of (project, task_count) ordered by creation time.
        """
        task_count = (
            select(func.count(Task.id))  # type: ignore[arg-type]
            .where(Task.project_id == Project.id)
            .correlate(Project)
            .scalar_subquery()
        )
        result = await self.session.execute(
            select(Project, task_count)
            .where(Project.team_id == team_id)
            .order_by(Project.created_at, Project.id)  # type: ignore[arg-type]
        )
        return [(project, count) for project, count in result.all()]
