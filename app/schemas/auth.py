"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Passwordless lookup used by the browser extension."""

    email: str | None = Field(default=None, max_length=255, description="Account email")


class DashboardLoginRequest(BaseModel):
    """Credentials for the dashboard; login matches email or username."""

    login: str | None = Field(default=None, max_length=255, description="Email or username")
    password: str | None = Field(default=None, max_length=128, description="Password")


class ChangePasswordRequest(BaseModel):
    current_password: str | None = Field(default=None, max_length=128)
    new_password: str | None = Field(default=None, max_length=128)


class CurrentUser(BaseModel):
    """Authenticated identity (no password hash) for dependency injection and responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str | None = None
    name: str
    role: str


class DashboardLoginResponse(BaseModel):
    """Identity plus JWT returned after a successful dashboard login."""

    user: CurrentUser
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class ChangePasswordResponse(BaseModel):
    success: bool = True
