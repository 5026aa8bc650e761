"""Prospect capture and pipeline updates."""

from sqlalchemy.orm import Session

from app.core.database import commit_or_conflict
from app.core.errors import NotFound, ValidationError
from app.models import LinkedInProfile, Prospect, User
from app.schemas.prospects import ProspectCreate, ProspectUpdate


def list_prospects(db: Session, user_id: str | None = None) -> list[Prospect]:
    query = db.query(Prospect)
    if user_id is not None:
        query = query.filter(Prospect.user_id == user_id)
    return query.order_by(Prospect.created_at.desc()).all()


def _check_profile(db: Session, linkedin_profile_id: str | None) -> None:
    if linkedin_profile_id is not None and db.get(LinkedInProfile, linkedin_profile_id) is None:
        raise NotFound("LinkedIn profile not found.")


def create_prospect(db: Session, body: ProspectCreate) -> Prospect:
    if db.get(User, body.user_id) is None:
        raise NotFound("User not found.")
    _check_profile(db, body.linkedin_profile_id)
    prospect = Prospect(**body.model_dump())
    db.add(prospect)
    commit_or_conflict(db, "Prospect conflicts with an existing record.")
    db.refresh(prospect)
    return prospect


def update_prospect(db: Session, prospect_id: str, body: ProspectUpdate) -> Prospect:
    prospect = db.get(Prospect, prospect_id)
    if prospect is None:
        raise NotFound("Prospect not found.")
    changes = body.model_dump(exclude_unset=True)
    if "linkedin_profile_id" in changes:
        _check_profile(db, changes["linkedin_profile_id"])
    for field in ("name", "status"):
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} cannot be null.")
    for field, value in changes.items():
        setattr(prospect, field, value)
    commit_or_conflict(db, "Prospect conflicts with an existing record.")
    db.refresh(prospect)
    return prospect
