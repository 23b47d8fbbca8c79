"""Tests for task endpoints."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.models import Project, Task, Team, User
from tests.factories import utc_now
from tests.helpers import auth_headers, create_project, create_task, create_team, create_user

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def project(db_session: AsyncSession, team: Team) -> Project:
    return await create_project(db_session, team, name="Website")


class TestCreateTask:
    async def test_create_starts_in_todo(
        self, client: AsyncClient, project: Project, member: User
    ) -> None:
        due = (utc_now() + timedelta(days=3)).isoformat()

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks",
            json={"title": "Write copy", "priority": "high", "due_date": due},
            headers=auth_headers(member),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "todo"
        assert data["priority"] == "high"
        assert data["project_name"] == "Website"
        assert data["completed_at"] is None

    async def test_timestamps_stored_as_naive_utc(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        due = utc_now() + timedelta(days=1)

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks",
            json={"title": "Stamp me", "due_date": due.isoformat() + "Z"},
            headers=auth_headers(member),
        )

        assert response.status_code == 201
        task = await db_session.get(Task, response.json()["id"], populate_existing=True)
        assert task is not None
        assert task.created_at.tzinfo is None
        assert task.due_date is not None
        assert task.due_date.tzinfo is None
        assert abs(task.due_date - due) < timedelta(seconds=1)

    async def test_assignee_must_be_member(
        self, client: AsyncClient, project: Project, member: User, outsider: User
    ) -> None:
        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks",
            json={"title": "Write copy", "assigned_to_user_id": outsider.id},
            headers=auth_headers(member),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Can only assign tasks to team members"

    async def test_past_due_date_rejected(
        self, client: AsyncClient, project: Project, member: User
    ) -> None:
        due = (utc_now() - timedelta(hours=1)).isoformat()

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks",
            json={"title": "Write copy", "due_date": due},
            headers=auth_headers(member),
        )

        assert response.status_code == 400

    async def test_outsider_forbidden(
        self, client: AsyncClient, project: Project, outsider: User
    ) -> None:
        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks",
            json={"title": "Write copy"},
            headers=auth_headers(outsider),
        )

        assert response.status_code == 403


class TestTaskAccess:
    async def test_task_under_wrong_project_is_404(
        self, client: AsyncClient, db_session: AsyncSession, team: Team, member: User
    ) -> None:
        first = await create_project(db_session, team)
        second = await create_project(db_session, team)
        task = await create_task(db_session, first)

        response = await client.get(
            f"/api/v1/projects/{second.id}/tasks/{task.id}", headers=auth_headers(member)
        )

        assert response.status_code == 404
        assert response.json()["message"] == f"Task with ID {task.id} not found"

    async def test_missing_task_is_404_for_outsider(
        self, client: AsyncClient, project: Project, outsider: User
    ) -> None:
        response = await client.get(
            f"/api/v1/projects/{project.id}/tasks/9999", headers=auth_headers(outsider)
        )

        assert response.status_code == 404

    async def test_outsider_cannot_read_task(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, outsider: User
    ) -> None:
        task = await create_task(db_session, project)

        response = await client.get(
            f"/api/v1/projects/{project.id}/tasks/{task.id}", headers=auth_headers(outsider)
        )

        assert response.status_code == 403

    async def test_list_is_ordered_by_creation(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        now = utc_now()
        later = await create_task(db_session, project, created_at=now)
        earlier = await create_task(db_session, project, created_at=now - timedelta(hours=1))

        response = await client.get(
            f"/api/v1/projects/{project.id}/tasks", headers=auth_headers(member)
        )

        assert [t["id"] for t in response.json()] == [earlier.id, later.id]


class TestTaskUpdates:
    async def test_update_replaces_fields(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        task = await create_task(db_session, project, description="old", priority="low")

        response = await client.put(
            f"/api/v1/projects/{project.id}/tasks/{task.id}",
            json={"title": "New title", "priority": "urgent"},
            headers=auth_headers(member),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "New title"
        assert data["priority"] == "urgent"
        assert data["description"] is None

    async def test_member_cannot_delete(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        task = await create_task(db_session, project)

        response = await client.delete(
            f"/api/v1/projects/{project.id}/tasks/{task.id}", headers=auth_headers(member)
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Only owners and managers can delete tasks"

    async def test_manager_deletes(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, manager: User
    ) -> None:
        task = await create_task(db_session, project)

        response = await client.delete(
            f"/api/v1/projects/{project.id}/tasks/{task.id}", headers=auth_headers(manager)
        )

        assert response.status_code == 204
        assert await db_session.get(Task, task.id, populate_existing=True) is None


class TestAssignment:
    async def test_assign_and_unassign(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        project: Project,
        member: User,
        manager: User,
    ) -> None:
        task = await create_task(db_session, project)

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks/{task.id}/assign",
            json={"user_id": manager.id},
            headers=auth_headers(member),
        )
        assert response.status_code == 200
        assert response.json()["assigned_to_user_id"] == manager.id
        assert response.json()["assigned_to_user_name"] == "Max Manager"

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks/{task.id}/unassign",
            headers=auth_headers(member),
        )
        assert response.status_code == 200
        assert response.json()["assigned_to_user_id"] is None
        assert response.json()["assigned_to_user_name"] is None

    async def test_assign_to_member_of_other_team_rejected(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        stranger = await create_user(db_session)
        await create_team(db_session, stranger)
        task = await create_task(db_session, project)

        response = await client.post(
            f"/api/v1/projects/{project.id}/tasks/{task.id}/assign",
            json={"user_id": stranger.id},
            headers=auth_headers(member),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Can only assign tasks to team members"

    async def test_deleting_assignee_unassigns_task(
        self, db_session: AsyncSession, project: Project
    ) -> None:
        assignee = await create_user(db_session)
        task = await create_task(db_session, project, assigned_to_user_id=assignee.id)

        await db_session.delete(assignee)
        await db_session.commit()

        refreshed = await db_session.get(Task, task.id, populate_existing=True)
        assert refreshed is not None
        assert refreshed.assigned_to_user_id is None


class TestStatusTransitions:
    async def test_done_sets_and_leaving_clears_completed_at(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        task = await create_task(db_session, project)
        url = f"/api/v1/projects/{project.id}/tasks/{task.id}/status"

        response = await client.put(url, json={"status": "done"}, headers=auth_headers(member))
        assert response.status_code == 200
        assert response.json()["status"] == "done"
        completed_at = response.json()["completed_at"]
        assert completed_at is not None

        response = await client.put(url, json={"status": "done"}, headers=auth_headers(member))
        assert response.json()["completed_at"] == completed_at

        response = await client.put(
            url, json={"status": "in_review"}, headers=auth_headers(member)
        )
        assert response.json()["status"] == "in_review"
        assert response.json()["completed_at"] is None

    async def test_any_transition_allowed(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        task = await create_task(db_session, project)
        url = f"/api/v1/projects/{project.id}/tasks/{task.id}/status"

        for status in ("done", "todo", "in_review", "in_progress", "done"):
            response = await client.put(url, json={"status": status}, headers=auth_headers(member))
            assert response.status_code == 200
            assert response.json()["status"] == status

    async def test_unknown_status_rejected(
        self, client: AsyncClient, db_session: AsyncSession, project: Project, member: User
    ) -> None:
        task = await create_task(db_session, project)

        response = await client.put(
            f"/api/v1/projects/{project.id}/tasks/{task.id}/status",
            json={"status": "archived"},
            headers=auth_headers(member),
        )

        assert response.status_code == 400
