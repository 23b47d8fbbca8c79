from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


class UserRead(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    created_at: datetime
    last_login_at: datetime | None = None

    model_config = {"from_attributes": True}


class RegisterRequest(BaseModel):
    email: EmailStr = Field(max_length=255)
    password: str = Field(min_length=6, max_length=100)
    confirm_password: str
    full_name: str = Field(min_length=2, max_length=100)

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_full_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(BaseModel):
    """Issued on successful registration or login."""

    user_id: int
    email: str
    full_name: str
    role: str
    token: str
    token_type: str = "bearer"
    expires_at: datetime
