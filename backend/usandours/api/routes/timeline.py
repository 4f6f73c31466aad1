"""
Timeline routes for relationship milestones.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from usandours.db.session import get_db
from usandours.schemas.timeline import MomentCreate, MomentUpdate, MomentResponse
from usandours.schemas.user import SessionUser
from usandours.services import timeline_service
from usandours.api.dependencies import get_current_user

router = APIRouter(prefix="/timeline", tags=["timeline"])


@router.get("", response_model=List[MomentResponse])
async def list_moments(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Timeline moments, oldest first."""
    return timeline_service.list_moments(db, current_user)


@router.post("", response_model=MomentResponse, status_code=status.HTTP_201_CREATED)
async def create_moment(
    data: MomentCreate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return timeline_service.create_moment(db, current_user, data)


@router.patch("/{moment_id}", response_model=MomentResponse)
async def update_moment(
    moment_id: int,
    data: MomentUpdate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return timeline_service.update_moment(db, current_user, moment_id, data)


@router.delete("/{moment_id}")
async def delete_moment(
    moment_id: int,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    timeline_service.delete_moment(db, current_user, moment_id)
    return {"success": True}
