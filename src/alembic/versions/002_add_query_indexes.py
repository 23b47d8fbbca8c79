"""Add indexes for task filtering/sorting and project/team lookups

Revision ID: 002
Revises: 001
Create Date: 2026-01-27 05:19:17.000000

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# (index name, table, columns)
INDEXES: list[tuple[str, str, list[str]]] = [
    ("ix_tasks_project_id_status", "tasks", ["project_id", "status"]),
    ("ix_tasks_project_id_priority", "tasks", ["project_id", "priority"]),
    ("ix_tasks_project_id_assigned_to_user_id", "tasks", ["project_id", "assigned_to_user_id"]),
    ("ix_tasks_due_date", "tasks", ["due_date"]),
    ("ix_tasks_created_at", "tasks", ["created_at"]),
    ("ix_projects_deadline", "projects", ["deadline"]),
    ("ix_projects_name", "projects", ["name"]),
    ("ix_teams_name", "teams", ["name"]),
]


def upgrade() -> None:
    for name, table, columns in INDEXES:
        op.create_index(name, table, columns, unique=False)


def downgrade() -> None:
    for name, table, _ in reversed(INDEXES):
        op.drop_index(name, table_name=table)
