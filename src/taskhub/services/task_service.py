"""Task lifecycle and the paged task query."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.exceptions import BadRequestError, NotFoundError
from src.taskhub.core.logging import get_logger
from src.taskhub.models import Project, Task, TaskStatus
from src.taskhub.repositories import MembershipRepository, ProjectRepository, TaskRepository
from src.taskhub.schemas.pagination import PagedResponse
from src.taskhub.schemas.task import TaskCreate, TaskQueryParams, TaskRead, TaskUpdate
from src.taskhub.services.authorization import AuthorizationService, Permission
from src.taskhub.services.base import BaseService

logger = get_logger(__name__)

ASSIGNEE_NOT_MEMBER_MESSAGE = "Can only assign tasks to team members"


def to_task_read(task: Task, assignee_name: str | None, project_name: str) -> TaskRead:
    return TaskRead(
        id=task.id,  # type: ignore[arg-type]
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        assigned_to_user_id=task.assigned_to_user_id,
        assigned_to_user_name=assignee_name,
        project_id=task.project_id,
        project_name=project_name,
        created_at=task.created_at,
        completed_at=task.completed_at,
    )


class TaskService(BaseService):
    """Task operations. Every team member may manage tasks; only owners and
    managers may delete them."""

    def __init__(
        self,
        task_repo: TaskRepository,
        project_repo: ProjectRepository,
        membership_repo: MembershipRepository,
        authz: AuthorizationService,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.task_repo = task_repo
        self.project_repo = project_repo
        self.membership_repo = membership_repo
        self.authz = authz

    async def _get_project_or_404(self, project_id: int) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError.for_entity("Project", project_id)
        return project

    async def _load(self, task_id: int, project_id: int | None) -> tuple[Task, Project]:
        """Load a task and its project.

        A task that belongs to a project other than project_id is reported as missing.
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None or (project_id is not None and task.project_id != project_id):
            raise NotFoundError.for_entity("Task", task_id)
        project = await self._get_project_or_404(task.project_id)
        return task, project

    async def _require_team_member(self, team_id: int, assignee_id: int) -> None:
        if not await self.membership_repo.is_member(team_id, assignee_id):
            raise BadRequestError(ASSIGNEE_NOT_MEMBER_MESSAGE)

    async def _read(self, task: Task, project: Project) -> TaskRead:
        row = await self.task_repo.get_row(task.id)  # type: ignore[arg-type]
        if row is None:
            raise NotFoundError.for_entity("Task", task.id)  # type: ignore[arg-type]
        reloaded, assignee_name = row
        return to_task_read(reloaded, assignee_name, project.name)

    async def create_task(self, project_id: int, data: TaskCreate, user_id: int) -> TaskRead:
        project = await self._get_project_or_404(project_id)
        await self.authz.require(project.team_id, user_id, Permission.MANAGE_TASKS)

        if data.assigned_to_user_id is not None:
            await self._require_team_member(project.team_id, data.assigned_to_user_id)

        task = Task(
            title=data.title,
            description=data.description,
            priority=data.priority.value,
            status=TaskStatus.TODO.value,
            due_date=data.due_date,
            assigned_to_user_id=data.assigned_to_user_id,
            project_id=project_id,
        )
        self.task_repo.add(task)
        await self._commit()
        await self.session.refresh(task)

        logger.info("Task created", task_id=task.id, project_id=project_id)
        return await self._read(task, project)

    async def get_task(
        self, task_id: int, user_id: int, project_id: int | None = None
    ) -> TaskRead:
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.VIEW)
        return await self._read(task, project)

    async def list_project_tasks(self, project_id: int, user_id: int) -> list[TaskRead]:
        project = await self._get_project_or_404(project_id)
        await self.authz.require(project.team_id, user_id, Permission.VIEW)

        rows = await self.task_repo.list_for_project(project_id)
        return [to_task_read(task, name, project.name) for task, name in rows]

    async def list_tasks_paged(
        self, project_id: int, params: TaskQueryParams, user_id: int
    ) -> PagedResponse[TaskRead]:
        """Filter, sort and page a project's tasks.

        The total is counted before paging, so a page past the end returns
        no items but the real totals.
        """
        project = await self._get_project_or_404(project_id)
        await self.authz.require(project.team_id, user_id, Permission.VIEW)

        rows, total_count = await self.task_repo.search(project_id, params)
        return PagedResponse[TaskRead].build(
            items=[to_task_read(task, name, project.name) for task, name in rows],
            page=params.page,
            page_size=params.page_size,
            total_count=total_count,
        )

    async def update_task(
        self, task_id: int, data: TaskUpdate, user_id: int, project_id: int | None = None
    ) -> TaskRead:
        """Replace title, description, priority and due date."""
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.MANAGE_TASKS)

        task.title = data.title
        task.description = data.description
        task.priority = data.priority.value
        task.due_date = data.due_date
        await self._commit()

        logger.info("Task updated", task_id=task_id)
        return await self._read(task, project)

    async def delete_task(
        self, task_id: int, user_id: int, project_id: int | None = None
    ) -> None:
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.DELETE_TASK)

        await self.task_repo.delete(task)
        await self._commit()

        logger.info("Task deleted", task_id=task_id, project_id=project.id)

    async def assign_task(
        self, task_id: int, assignee_id: int, user_id: int, project_id: int | None = None
    ) -> TaskRead:
        """Assign the task to a member of its team.

        Raises:
            BadRequestError: If the assignee is not a member of the task's team.
        """
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.MANAGE_TASKS)
        await self._require_team_member(project.team_id, assignee_id)

        task.assigned_to_user_id = assignee_id
        await self._commit()

        logger.info("Task assigned", task_id=task_id, assignee_id=assignee_id)
        return await self._read(task, project)

    async def unassign_task(
        self, task_id: int, user_id: int, project_id: int | None = None
    ) -> TaskRead:
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.MANAGE_TASKS)

        task.assigned_to_user_id = None
        await self._commit()

        logger.info("Task unassigned", task_id=task_id)
        return await self._read(task, project)

    async def update_task_status(
        self,
        task_id: int,
        new_status: TaskStatus,
        user_id: int,
        project_id: int | None = None,
    ) -> TaskRead:
        """Move the task to any status, keeping completed_at in step."""
        task, project = await self._load(task_id, project_id)
        await self.authz.require(project.team_id, user_id, Permission.MANAGE_TASKS)

        previous = task.status
        task.apply_status(new_status)
        await self._commit()

        logger.info(
            "Task status changed",
            task_id=task_id,
            from_status=previous,
            to_status=new_status.value,
        )
        return await self._read(task, project)
