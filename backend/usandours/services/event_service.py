"""
Event service for the shared calendar.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
import logging
from usandours.core.exceptions import NotFoundError
from usandours.models.couple import Couple
from usandours.models.event import Event, EventType
from usandours.schemas.event import EventCreate
from usandours.schemas.user import SessionUser
from usandours.services import calendar_service
from usandours.services.access_service import require_couple

logger = logging.getLogger(__name__)

NEXT_MEETING_TITLE = "Next Date ❤️"
NEXT_MEETING_SYNC_TITLE = "Next Date: Us & Ours"
NEXT_MEETING_SYNC_DESCRIPTION = "Time for a date! 💕"
EVENT_SYNC_DESCRIPTION = "Event from Us & Ours"


def list_events(db: Session, current_user: SessionUser) -> List[Event]:
    couple_id = require_couple(current_user)
    return db.query(Event).filter(
        Event.couple_id == couple_id
    ).order_by(Event.date.asc(), Event.id.asc()).all()


def add_event(
    db: Session,
    couple_id: int,
    title: str,
    day: date,
    event_type: EventType = EventType.DATE
) -> Event:
    """Insert an event for a room."""
    event = Event(couple_id=couple_id, title=title, date=day, type=event_type)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


async def _sync(db: Session, couple_id: int, title: str, day: date, description: Optional[str]) -> None:
    couple = db.query(Couple).filter(Couple.id == couple_id).first()
    synced = await calendar_service.sync_event_for_couple(db, couple, title, day, description)
    logger.info(f"Event '{title}' on {day} synced to {synced} calendar(s) for couple {couple_id}")


async def create_event(db: Session, current_user: SessionUser, data: EventCreate) -> Event:
    """Create an event and push it to the partners' Google calendars."""
    couple_id = require_couple(current_user)
    event = add_event(db, couple_id, data.title, data.date, data.type)
    await _sync(db, couple_id, data.title, data.date, EVENT_SYNC_DESCRIPTION)
    return event


async def schedule_next_meeting(db: Session, couple_id: int, day: date) -> Event:
    """Calendar entry (and Google sync) for the couple's next meeting."""
    event = add_event(db, couple_id, NEXT_MEETING_TITLE, day)
    await _sync(db, couple_id, NEXT_MEETING_SYNC_TITLE, day, NEXT_MEETING_SYNC_DESCRIPTION)
    return event


def delete_event(db: Session, current_user: SessionUser, event_id: int) -> None:
    couple_id = require_couple(current_user)
    event = db.query(Event).filter(
        Event.id == event_id,
        Event.couple_id == couple_id
    ).first()
    if not event:
        raise NotFoundError("Event not found")
    db.delete(event)
    db.commit()
