"""User model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.taskhub.models.base import utc_now
from src.taskhub.models.enums import UserRole


class User(SQLModel, table=True):
    """Registered user. Email is unique and compared exactly as stored."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    full_name: str = Field(max_length=100)
    hashed_password: str = Field(max_length=255)
    role: str = Field(default=UserRole.USER.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    last_login_at: datetime | None = Field(default=None)

    @property
    def role_enum(self) -> UserRole:
        return UserRole(self.role)
