"""User administration endpoints (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.users import UserCreate, UserRead, UserUpdate
from app.services import users as user_service

router = APIRouter()


@router.get("", response_model=list[UserRead])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRead]:
    """List all users, newest first."""
    return [user_service.to_read(u) for u in user_service.list_users(db)]


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    """Create a user. A profile_user must name an existing linkedin_profile_id."""
    return user_service.to_read(user_service.create_user(db, body))


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    return user_service.to_read(user_service.get_user(db, user_id))


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    body: UserUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    return user_service.to_read(user_service.update_user(db, user_id, body))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a user. Outstanding tokens for the user stop working immediately."""
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
