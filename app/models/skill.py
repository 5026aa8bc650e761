"""ORM model for skills a prospect can be tagged with."""

from sqlalchemy import Column, DateTime, String, func

from app.models.base import Base, new_uuid


class Skill(Base):
    __tablename__ = "skills"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(255), nullable=False, unique=True, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
