"""ORM model for the LinkedIn profiles prospects are worked from."""

from sqlalchemy import Column, DateTime, String, func

from app.models.base import Base, new_uuid


class LinkedInProfile(Base):
    """Named reference profile, seeded once. niche is an optional category tag."""

    __tablename__ = "linkedin_profiles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(255), nullable=False, unique=True, index=True)
    niche = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
