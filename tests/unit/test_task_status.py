"""Unit tests for task status transitions and completion timestamps."""

from datetime import datetime

import pytest

from src.taskhub.models import Task, TaskStatus

pytestmark = pytest.mark.unit

COMPLETED = datetime(2030, 1, 1, 12, 0, 0)


def make_task(**kwargs) -> Task:
    return Task(title="Write docs", project_id=1, **kwargs)


def test_new_task_is_todo_without_completion():
    task = make_task()
    assert task.status_enum == TaskStatus.TODO
    assert task.completed_at is None


def test_entering_done_sets_completed_at():
    task = make_task()

    task.apply_status(TaskStatus.DONE, now=COMPLETED)

    assert task.status == "done"
    assert task.completed_at == COMPLETED


def test_done_to_done_keeps_original_completion():
    task = make_task()
    task.apply_status(TaskStatus.DONE, now=COMPLETED)

    task.apply_status(TaskStatus.DONE, now=datetime(2031, 1, 1))

    assert task.completed_at == COMPLETED


@pytest.mark.parametrize(
    "status", [TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.IN_REVIEW]
)
def test_leaving_done_clears_completed_at(status: TaskStatus):
    task = make_task()
    task.apply_status(TaskStatus.DONE, now=COMPLETED)

    task.apply_status(status)

    assert task.status_enum == status
    assert task.completed_at is None


def test_done_without_explicit_time_uses_now():
    task = make_task()

    task.apply_status(TaskStatus.DONE)

    assert task.completed_at is not None
    assert task.completed_at.tzinfo is None
