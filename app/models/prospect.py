"""ORM model for prospects captured from LinkedIn by the extension or dashboard."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from app.models.base import Base, new_uuid


class Prospect(Base):
    """
    A person being prospected, owned by the user who captured it.

    status is free-form pipeline state (e.g. new, contacted, replied).
    """

    __tablename__ = "prospects"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    linkedin_profile_id = Column(
        String(36),
        ForeignKey("linkedin_profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    profile_url = Column(String(2048), nullable=True)
    status = Column(String(32), nullable=False, default="new")
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
