"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.linkedin_profile import LinkedInProfile
from app.models.prospect import Prospect
from app.models.skill import Skill
from app.models.user import Role, User

__all__ = ["Base", "LinkedInProfile", "Prospect", "Role", "Skill", "User"]
