"""Login endpoints and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import TokenError, TokenIssuer, get_token_issuer
from app.models.user import Role, User
from app.schemas.auth import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    CurrentUser,
    DashboardLoginRequest,
    DashboardLoginResponse,
    LoginRequest,
)
from app.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/login", response_model=CurrentUser)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Extension login: look the account up by email. No token is issued;
    the extension only needs the user id to attach prospects to.
    """
    user = auth_service.lookup_by_email(db, body.email)
    return CurrentUser.model_validate(user)


@router.post("/dashboard-login", response_model=DashboardLoginResponse)
def dashboard_login(
    body: DashboardLoginRequest,
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> DashboardLoginResponse:
    """
    Authenticate with email or username and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = auth_service.authenticate(db, body.login, body.password, issuer)
    return DashboardLoginResponse(user=CurrentUser.model_validate(user), token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Not authenticated")
    try:
        claims = issuer.verify(credentials.credentials)
    except TokenError:
        raise _unauthorized("Invalid or expired token")
    user = db.get(User, claims.subject_id)
    if user is None:
        raise _unauthorized("User not found")
    return CurrentUser.model_validate(user)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin' (exact match). Raises 403 otherwise."""
    if current_user.role != Role.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.get("/me", response_model=CurrentUser)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    return current_user


@router.post("/change-password", response_model=ChangePasswordResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ChangePasswordResponse:
    """Change the caller's password. Requires the current password."""
    auth_service.change_password(
        db, current_user.id, body.current_password, body.new_password
    )
    return ChangePasswordResponse(success=True)
