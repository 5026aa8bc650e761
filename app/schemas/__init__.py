"""Pydantic request/response schemas."""

from app.schemas.auth import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    CurrentUser,
    DashboardLoginRequest,
    DashboardLoginResponse,
    LoginRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.prospects import ProspectCreate, ProspectRead, ProspectUpdate
from app.schemas.reference import LinkedInProfileRead, SkillRead
from app.schemas.users import UserCreate, UserRead, UserUpdate

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "CurrentUser",
    "DashboardLoginRequest",
    "DashboardLoginResponse",
    "HealthResponse",
    "LinkedInProfileRead",
    "LoginRequest",
    "ProspectCreate",
    "ProspectRead",
    "ProspectUpdate",
    "SkillRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
