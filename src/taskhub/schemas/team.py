from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.taskhub.core.validators import blank_to_none
from src.taskhub.models import TeamRole


class TeamCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class TeamUpdate(TeamCreate):
    """Full replacement of a team's editable fields."""


class TeamRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime
    member_count: int = 0


class TeamMemberRead(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_email: str
    role: str
    joined_at: datetime


class TeamDetail(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime
    members: list[TeamMemberRead] = []


class AddMemberRequest(BaseModel):
    user_id: int = Field(gt=0, description="ID of the user to add")
    role: TeamRole = TeamRole.MEMBER


class UpdateMemberRoleRequest(BaseModel):
    role: TeamRole
