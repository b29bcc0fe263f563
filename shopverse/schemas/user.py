# shopverse/schemas/user.py
from datetime import datetime

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class RegisterInput(SQLModel):
    """
    Payload for customer sign-up.

    Validation rules:
      - email must be a valid EmailStr
      - name and password cannot be empty
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class LoginInput(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminLoginInput(SQLModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRead(SQLModel):
    """Response schema returned to clients (no password hash)."""

    id: str
    name: str
    email: str
    created_at: datetime


class AdminRead(SQLModel):
    id: str
    username: str


class AuthResponse(SQLModel):
    message: str
    user: UserRead
    access_token: str
    token_type: str = "bearer"


class AdminAuthResponse(SQLModel):
    message: str
    admin: AdminRead
    access_token: str
    token_type: str = "bearer"


class CurrentUserResponse(SQLModel):
    user: UserRead | None


class CurrentAdminResponse(SQLModel):
    admin: AdminRead | None
