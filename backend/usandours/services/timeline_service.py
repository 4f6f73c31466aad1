"""
Timeline service for the couple's milestones.
"""
from sqlalchemy.orm import Session
from typing import List
from usandours.core.exceptions import NotFoundError
from usandours.models.timeline import TimelineMoment
from usandours.schemas.timeline import MomentCreate, MomentUpdate
from usandours.schemas.user import SessionUser
from usandours.services.access_service import require_couple


def list_moments(db: Session, current_user: SessionUser) -> List[TimelineMoment]:
    """Moments in chronological order (oldest first)."""
    couple_id = require_couple(current_user)
    return db.query(TimelineMoment).filter(
        TimelineMoment.couple_id == couple_id
    ).order_by(TimelineMoment.date.asc(), TimelineMoment.id.asc()).all()


def get_moment(db: Session, current_user: SessionUser, moment_id: int) -> TimelineMoment:
    couple_id = require_couple(current_user)
    moment = db.query(TimelineMoment).filter(
        TimelineMoment.id == moment_id,
        TimelineMoment.couple_id == couple_id
    ).first()
    if not moment:
        raise NotFoundError("Moment not found")
    return moment


def create_moment(db: Session, current_user: SessionUser, data: MomentCreate) -> TimelineMoment:
    couple_id = require_couple(current_user)
    moment = TimelineMoment(
        couple_id=couple_id,
        title=data.title,
        description=data.description,
        date=data.date,
        image=data.image,
        icon_type=data.icon_type
    )
    db.add(moment)
    db.commit()
    db.refresh(moment)
    return moment


def update_moment(db: Session, current_user: SessionUser, moment_id: int, data: MomentUpdate) -> TimelineMoment:
    moment = get_moment(db, current_user, moment_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        # title, date and icon are required columns; description/image may be cleared
        if value is None and field in ("title", "date", "icon_type"):
            continue
        setattr(moment, field, value)

    db.commit()
    db.refresh(moment)
    return moment


def delete_moment(db: Session, current_user: SessionUser, moment_id: int) -> None:
    moment = get_moment(db, current_user, moment_id)
    db.delete(moment)
    db.commit()
