"""Request/response schemas for user administration."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import Role


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    username: str | None = Field(default=None, max_length=255)
    role: Role = Role.USER
    password: str | None = Field(default=None, max_length=128)
    linkedin_profile_id: str | None = None


class UserUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    email: str | None = Field(default=None, min_length=3, max_length=255)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    username: str | None = Field(default=None, max_length=255)
    role: Role | None = None
    linkedin_profile_id: str | None = None


class UserRead(BaseModel):
    """User entry for admin endpoints (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str | None = None
    name: str
    role: str
    linkedin_profile_id: str | None = None
    has_password: bool = False
    created_at: datetime | None = None
