"""Request/response schemas for prospects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProspectCreate(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=36)
    name: str = Field(..., min_length=1, max_length=255)
    linkedin_profile_id: str | None = None
    title: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    profile_url: str | None = Field(default=None, max_length=2048)
    status: str = Field(default="new", min_length=1, max_length=32)
    notes: str | None = None


class ProspectUpdate(BaseModel):
    """
    Partial update; only fields present in the request body are applied.

    name and status are required columns: an explicit null for either is a 400.
    Other fields may be cleared with null.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    linkedin_profile_id: str | None = None
    title: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    profile_url: str | None = Field(default=None, max_length=2048)
    status: str | None = Field(default=None, min_length=1, max_length=32)
    notes: str | None = None


class ProspectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    linkedin_profile_id: str | None = None
    name: str
    title: str | None = None
    company: str | None = None
    profile_url: str | None = None
    status: str
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
