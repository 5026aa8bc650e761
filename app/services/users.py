"""User administration: create, read, update, delete, set password."""

import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import commit_or_conflict
from app.core.errors import NotFound, ValidationError
from app.core.security import hash_password
from app.models import LinkedInProfile, User
from app.models.user import Role
from app.schemas.users import UserCreate, UserRead, UserUpdate
from app.services.auth import normalize_email

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "A user with this email or username already exists."


def _normalize_username(username: str | None) -> str | None:
    """Usernames may not look like emails, so a login string never matches two accounts."""
    if username is None or not username.strip():
        return None
    if "@" in username:
        raise ValidationError("Username must not contain '@'.")
    return username.strip().lower()


def _check_profile_binding(db: Session, role: str, linkedin_profile_id: str | None) -> None:
    """A profile-bound user must reference an existing LinkedIn profile."""
    if linkedin_profile_id is not None and db.get(LinkedInProfile, linkedin_profile_id) is None:
        raise ValidationError("LinkedIn profile not found.")
    if role == Role.PROFILE_USER.value and linkedin_profile_id is None:
        raise ValidationError("A profile_user must be linked to a LinkedIn profile.")


def to_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        username=user.username,
        name=user.name,
        role=user.role,
        linkedin_profile_id=user.linkedin_profile_id,
        has_password=user.password_hash is not None,
        created_at=user.created_at,
    )


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at.desc()).all()


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")
    return user


def create_user(db: Session, body: UserCreate) -> User:
    """Create a user. Role is validated against the Role enum by the schema."""
    email = normalize_email(body.email)
    if not email:
        raise ValidationError("Email is required.")
    role = Role(body.role).value
    _check_profile_binding(db, role, body.linkedin_profile_id)
    if body.password is not None and len(body.password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters."
        )

    user = User(
        email=email,
        username=_normalize_username(body.username),
        name=body.name.strip(),
        role=role,
        password_hash=hash_password(body.password) if body.password else None,
        linkedin_profile_id=body.linkedin_profile_id,
    )
    db.add(user)
    commit_or_conflict(db, DUPLICATE_USER_MESSAGE)
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "role": user.role})
    return user


def update_user(db: Session, user_id: str, body: UserUpdate) -> User:
    user = get_user(db, user_id)
    changes = body.model_dump(exclude_unset=True)

    role = Role(changes["role"]).value if changes.get("role") is not None else user.role
    profile_id = changes.get("linkedin_profile_id", user.linkedin_profile_id)
    _check_profile_binding(db, role, profile_id)

    email = user.email
    if changes.get("email") is not None:
        email = normalize_email(changes["email"])
        if not email:
            raise ValidationError("Email is required.")
    username = user.username
    if "username" in changes:
        username = _normalize_username(changes["username"])

    user.email = email
    user.username = username
    if changes.get("name") is not None:
        user.name = changes["name"].strip()
    user.role = role
    user.linkedin_profile_id = profile_id
    commit_or_conflict(db, DUPLICATE_USER_MESSAGE)
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: str) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id})


def set_password(db: Session, user: User, password: str, username: str | None = None) -> User:
    """Assign a password (and optionally a username) outside the login flow."""
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters."
        )
    if username is not None:
        user.username = _normalize_username(username)
    user.password_hash = hash_password(password)
    commit_or_conflict(db, DUPLICATE_USER_MESSAGE)
    return user
