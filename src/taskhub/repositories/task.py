"""Repository for Task entity, including the filtered/sorted/paged listing."""

from typing import Any

from sqlalchemy import and_, case, func, or_
from sqlmodel import select

from src.taskhub.models import PRIORITY_RANK, Task, User
from src.taskhub.repositories.base import BaseRepository
from src.taskhub.schemas.task import TaskQueryParams

# Row shape returned by listing queries: the task and its assignee's display name
TaskRow = tuple[Task, str | None]

_DUE_DATE_KEYS = frozenset({"duedate", "due_date"})
_PRIORITY_KEYS = frozenset({"priority"})


def build_task_filters(project_id: int, params: TaskQueryParams) -> list[Any]:
    """Build the conjunction of filters requested by params.

    Absent filters are skipped. The search term matches title or a non-null
    description, case-insensitively, with LIKE wildcards escaped.
    """
    conditions: list[Any] = [Task.project_id == project_id]

    if params.status is not None:
        conditions.append(Task.status == params.status.value)
    if params.priority is not None:
        conditions.append(Task.priority == params.priority.value)
    if params.assigned_to_user_id is not None:
        conditions.append(Task.assigned_to_user_id == params.assigned_to_user_id)
    if params.due_date_from is not None:
        conditions.append(Task.due_date >= params.due_date_from)  # type: ignore[operator]
    if params.due_date_to is not None:
        conditions.append(Task.due_date <= params.due_date_to)  # type: ignore[operator]
    if params.search_term:
        term = params.search_term
        conditions.append(
            or_(
                Task.title.icontains(term, autoescape=True),  # type: ignore[attr-defined]
                and_(
                    Task.description.is_not(None),  # type: ignore[union-attr]
                    Task.description.icontains(term, autoescape=True),  # type: ignore[union-attr]
                ),
            )
        )
    return conditions


def build_task_ordering(sort_by: str | None, descending: bool) -> list[Any]:
    """Resolve a sort key into ORDER BY clauses.

    Unknown or absent keys sort by creation time. Priority sorts by rank,
    not alphabetically. Tasks without a due date always come last. The id
    breaks ties so paging is stable.
    """
    key = (sort_by or "").strip().lower()

    def direct(column: Any) -> Any:
        return column.desc() if descending else column.asc()

    if key in _PRIORITY_KEYS:
        rank = case(PRIORITY_RANK, value=Task.priority, else_=0)
        return [direct(rank), direct(Task.id)]
    if key in _DUE_DATE_KEYS:
        return [
            Task.due_date.is_(None),  # type: ignore[union-attr]
            direct(Task.due_date),
            direct(Task.id),
        ]
    return [direct(Task.created_at), direct(Task.id)]


class TaskRepository(BaseRepository[Task]):
    """Repository for tasks."""

    model = Task

    def _select_rows(self) -> Any:
        return select(Task, User.full_name).outerjoin(
            User, User.id == Task.assigned_to_user_id  # type: ignore[arg-type]
        )

    async def get_row(self, task_id: int) -> TaskRow | None:
        """Get a task with its assignee's name."""
        result = await self.session.execute(self._select_rows().where(Task.id == task_id))
        row = result.first()
        return (row[0], row[1]) if row is not None else None

    async def list_for_project(self, project_id: int) -> list[TaskRow]:
        """List every task of a project with assignee names, oldest first."""
        result = await self.session.execute(
            self._select_rows()
            .where(Task.project_id == project_id)
            .order_by(Task.created_at, Task.id)  # type: ignore[arg-type]
        )
        return [(task, name) for task, name in result.all()]

    async def search(
        self, project_id: int, params: TaskQueryParams
    ) -> tuple[list[TaskRow], int]:
        """Filter, sort and page a project's tasks.

        Returns:
            Tuple of (rows for the requested page, total matching count)
        """
        conditions = build_task_filters(project_id, params)

        count_result = await self.session.execute(
            select(func.count(Task.id)).where(*conditions)  # type: ignore[arg-type]
        )
        total_count = count_result.scalar_one()

        result = await self.session.execute(
            self._select_rows()
            .where(*conditions)
            .order_by(*build_task_ordering(params.sort_by, params.sort_descending))
            .offset(params.offset)
            .limit(params.page_size)
        )
        return [(task, name) for task, name in result.all()], total_count
