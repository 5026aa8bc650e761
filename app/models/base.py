"""SQLAlchemy declarative Base and shared column helpers."""

import uuid

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def new_uuid() -> str:
    """Default primary key for tables keyed by string UUIDs."""
    return str(uuid.uuid4())
