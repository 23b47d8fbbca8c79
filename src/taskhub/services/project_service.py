"""Project lifecycle inside a team."""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.exceptions import NotFoundError
from src.taskhub.core.logging import get_logger
from src.taskhub.models import Project, Team
from src.taskhub.repositories import ProjectRepository, TaskRepository, TeamRepository
from src.taskhub.schemas.project import ProjectDetail, ProjectRead
from src.taskhub.services.authorization import AuthorizationService, Permission
from src.taskhub.services.base import BaseService
from src.taskhub.services.task_service import to_task_read

logger = get_logger(__name__)


class ProjectService(BaseService):
    def __init__(
        self,
        project_repo: ProjectRepository,
        team_repo: TeamRepository,
        task_repo: TaskRepository,
        authz: AuthorizationService,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.project_repo = project_repo
        self.team_repo = team_repo
        self.task_repo = task_repo
        self.authz = authz

    async def _get_team_or_404(self, team_id: int) -> Team:
        team = await self.team_repo.get_by_id(team_id)
        if team is None:
            raise NotFoundError.for_entity("Team", team_id)
        return team

    async def _load(self, project_id: int, team_id: int | None) -> tuple[Project, Team]:
        """Load a project and its team.

        A project that belongs to a team other than team_id is reported as missing.
        """
        project = await self.project_repo.get_by_id(project_id)
        if project is None or (team_id is not None and project.team_id != team_id):
            raise NotFoundError.for_entity("Project", project_id)
        team = await self._get_team_or_404(project.team_id)
        return project, team

    async def _to_detail(self, project: Project, team: Team) -> ProjectDetail:
        rows = await self.task_repo.list_for_project(project.id)  # type: ignore[arg-type]
        return ProjectDetail(
            id=project.id,  # type: ignore[arg-type]
            name=project.name,
            description=project.description,
            team_id=project.team_id,
            team_name=team.name,
            created_at=project.created_at,
            deadline=project.deadline,
            tasks=[to_task_read(task, assignee_name, project.name) for task, assignee_name in rows],
        )

    async def create_project(
        self,
        team_id: int,
        name: str,
        description: str | None,
        deadline: datetime | None,
        user_id: int,
    ) -> ProjectDetail:
        team = await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.CREATE_PROJECT)

        project = Project(name=name, description=description, deadline=deadline, team_id=team_id)
        self.project_repo.add(project)
        await self._commit()
        await self.session.refresh(project)

        logger.info("Project created", project_id=project.id, team_id=team_id)
        return await self._to_detail(project, team)

    async def get_project(
        self, project_id: int, user_id: int, team_id: int | None = None
    ) -> ProjectDetail:
        """Get a project with all of its tasks."""
        project, team = await self._load(project_id, team_id)
        await self.authz.require(project.team_id, user_id, Permission.VIEW)
        return await self._to_detail(project, team)

    async def list_team_projects(self, team_id: int, user_id: int) -> list[ProjectRead]:
        team = await self._get_team_or_404(team_id)
        await self.authz.require(team_id, user_id, Permission.VIEW)

        rows = await self.project_repo.list_for_team(team_id)
        return [
            ProjectRead(
                id=project.id,  # type: ignore[arg-type]
                name=project.name,
                description=project.description,
                team_id=project.team_id,
                team_name=team.name,
                created_at=project.created_at,
                deadline=project.deadline,
                task_count=task_count,
            )
            for project, task_count in rows
        ]

    async def update_project(
        self,
        project_id: int,
        name: str,
        description: str | None,
        deadline: datetime | None,
        user_id: int,
        team_id: int | None = None,
    ) -> ProjectDetail:
        project, team = await self._load(project_id, team_id)
        await self.authz.require(project.team_id, user_id, Permission.UPDATE_PROJECT)

        project.name = name
        project.description = description
        project.deadline = deadline
        await self._commit()

        logger.info("Project updated", project_id=project_id)
        return await self._to_detail(project, team)

    async def delete_project(
        self, project_id: int, user_id: int, team_id: int | None = None
    ) -> None:
        """Delete a project and, through the store's cascade, its tasks."""
        project, _ = await self._load(project_id, team_id)
        await self.authz.require(project.team_id, user_id, Permission.DELETE_PROJECT)

        await self.project_repo.delete(project)
        await self._commit()

        logger.info("Project deleted", project_id=project_id, team_id=project.team_id)
