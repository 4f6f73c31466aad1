"""
Shared calendar routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from usandours.db.session import get_db
from usandours.schemas.event import EventCreate, EventResponse, EventListResponse, EventEnvelope
from usandours.schemas.user import SessionUser
from usandours.services import event_service
from usandours.api.dependencies import get_current_user

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventListResponse)
async def list_events(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Events in date order."""
    events = event_service.list_events(db, current_user)
    return EventListResponse(events=[EventResponse.model_validate(e) for e in events])


@router.post("", response_model=EventEnvelope)
async def create_event(
    data: EventCreate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create an event; it is also pushed to connected Google calendars."""
    event = await event_service.create_event(db, current_user, data)
    return EventEnvelope(event=EventResponse.model_validate(event))


@router.delete("/{event_id}")
async def delete_event(
    event_id: int,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    event_service.delete_event(db, current_user, event_id)
    return {"success": True}
