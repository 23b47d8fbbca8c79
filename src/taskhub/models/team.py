"""Team and membership models."""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.taskhub.models.base import utc_now
from src.taskhub.models.enums import TeamRole


class Team(SQLModel, table=True):
    """Team. Deleting it cascades to memberships, projects and their tasks."""

    __tablename__ = "teams"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)


class TeamMember(SQLModel, table=True):
    """Junction table for user-team membership carrying the member's role."""

    __tablename__ = "team_members"
    __table_args__ = (
        UniqueConstraint("team_id", "user_id", name="uq_team_members_team_id_user_id"),
    )

    id: int | None = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", ondelete="CASCADE", index=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    role: str = Field(default=TeamRole.MEMBER.value, max_length=20)
    joined_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> TeamRole:
        """Get role as TeamRole enum."""
        return TeamRole(self.role)
