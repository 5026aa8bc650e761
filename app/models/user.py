"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base, new_uuid


class Role(str, enum.Enum):
    """Closed set of user roles. Values are stored lowercase."""

    ADMIN = "admin"
    USER = "user"
    # Profile-bound: the account acts on behalf of one LinkedIn profile.
    PROFILE_USER = "profile_user"


class User(Base):
    """
    User account for the dashboard and the browser extension.

    email and username are stored trimmed and lowercased; the unique indexes
    are on lower(email) and lower(username), so rows written outside the
    service layer cannot introduce case variants either. password_hash is null until a
    password is explicitly set; such users cannot use password login.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role <> 'profile_user' OR linkedin_profile_id IS NOT NULL",
            name="ck_users_profile_user_has_profile",
        ),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    email = Column(String(255), nullable=False)
    username = Column(String(255), nullable=True)
    name = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.USER.value)
    password_hash = Column(String(255), nullable=True)
    linkedin_profile_id = Column(
        String(36),
        ForeignKey("linkedin_profiles.id", ondelete="RESTRICT"),
        nullable=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    linkedin_profile = relationship("LinkedInProfile")


Index("uq_users_email_lower", func.lower(User.email), unique=True)
Index("uq_users_username_lower", func.lower(User.username), unique=True)
