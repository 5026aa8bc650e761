"""Read-only reference data: LinkedIn profiles and skills."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import LinkedInProfile, Skill
from app.schemas.reference import LinkedInProfileRead, SkillRead

router = APIRouter()


@router.get("/linkedin-profiles", response_model=list[LinkedInProfileRead])
def list_linkedin_profiles(db: Annotated[Session, Depends(get_db)]) -> list[LinkedInProfileRead]:
    profiles = db.query(LinkedInProfile).order_by(LinkedInProfile.name).all()
    return [LinkedInProfileRead.model_validate(p) for p in profiles]


@router.get("/skills", response_model=list[SkillRead])
def list_skills(db: Annotated[Session, Depends(get_db)]) -> list[SkillRead]:
    skills = db.query(Skill).order_by(Skill.name).all()
    return [SkillRead.model_validate(s) for s in skills]
