"""Login flows: passwordless email lookup, dashboard password login, password change."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import (
    BadCredentials,
    NoPasswordSet,
    NoSuchAccount,
    NotFound,
    ValidationError,
)
from app.core.security import TokenIssuer, hash_password, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def lookup_by_email(db: Session, email: str | None) -> User:
    """
    Resolve the extension's account by email alone. No session token is issued.

    Raises ValidationError when email is missing, NoSuchAccount when no user matches.
    """
    if email is None or not email.strip():
        raise ValidationError("Email is required.")
    normalized = normalize_email(email)
    user = db.query(User).filter(func.lower(User.email) == normalized).first()
    if user is None:
        logger.info("Extension login rejected: no such account")
        raise NoSuchAccount("No account found for this email.")
    return user


def authenticate(
    db: Session,
    login: str | None,
    password: str | None,
    issuer: TokenIssuer,
) -> tuple[User, str]:
    """
    Dashboard login. `login` matches email or username, case-insensitively.
    An email match wins over a username match.

    Returns (user, token). The three failure causes (no account, no password
    set, wrong password) are distinct exceptions that all map to 401.
    """
    if not login or not login.strip() or not password:
        raise ValidationError("Login and password are required.")
    needle = login.strip().lower()
    user = db.query(User).filter(func.lower(User.email) == needle).first()
    if user is None:
        user = db.query(User).filter(func.lower(User.username) == needle).first()
    if user is None:
        logger.info("Dashboard login rejected", extra={"reason": "no_such_account"})
        raise NoSuchAccount("Invalid login or password.")
    if user.password_hash is None:
        logger.info(
            "Dashboard login rejected",
            extra={"reason": "no_password_set", "user_id": user.id},
        )
        raise NoPasswordSet("Password login is not enabled for this account.")
    if not verify_password(password, user.password_hash):
        logger.info(
            "Dashboard login rejected",
            extra={"reason": "bad_credentials", "user_id": user.id},
        )
        raise BadCredentials("Invalid login or password.")
    token = issuer.issue(user.id, user.role)
    logger.info("Dashboard login succeeded", extra={"user_id": user.id})
    return user, token


def change_password(
    db: Session,
    user_id: str,
    current_password: str | None,
    new_password: str | None,
) -> None:
    """Replace the stored hash after checking the current password."""
    if not current_password or not new_password:
        raise ValidationError("Current password and new password are required.")
    if len(new_password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"New password must be at least {settings.PASSWORD_MIN_LENGTH} characters."
        )
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")
    if user.password_hash is None:
        raise ValidationError("No password is set for this account.")
    if not verify_password(current_password, user.password_hash):
        raise BadCredentials("Current password is incorrect.")
    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed", extra={"user_id": user.id})
