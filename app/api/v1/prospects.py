"""Prospect endpoints used by the browser extension and the dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.prospects import ProspectCreate, ProspectRead, ProspectUpdate
from app.services import prospects as prospect_service

router = APIRouter()


@router.get("", response_model=list[ProspectRead])
def list_prospects(db: Annotated[Session, Depends(get_db)]) -> list[ProspectRead]:
    """All prospects, newest first."""
    return [ProspectRead.model_validate(p) for p in prospect_service.list_prospects(db)]


@router.get("/user/{user_id}", response_model=list[ProspectRead])
def list_prospects_for_user(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[ProspectRead]:
    prospects = prospect_service.list_prospects(db, user_id=user_id)
    return [ProspectRead.model_validate(p) for p in prospects]


@router.post("", response_model=ProspectRead, status_code=status.HTTP_201_CREATED)
def create_prospect(
    body: ProspectCreate,
    db: Annotated[Session, Depends(get_db)],
) -> ProspectRead:
    return ProspectRead.model_validate(prospect_service.create_prospect(db, body))


@router.put("/{prospect_id}", response_model=ProspectRead)
def update_prospect(
    prospect_id: str,
    body: ProspectUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> ProspectRead:
    return ProspectRead.model_validate(
        prospect_service.update_prospect(db, prospect_id, body)
    )
