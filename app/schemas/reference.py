"""Schemas for seeded reference data (LinkedIn profiles, skills)."""

from pydantic import BaseModel, ConfigDict


class LinkedInProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    niche: str | None = None


class SkillRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
