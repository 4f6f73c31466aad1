"""
Couple (room) routes: details, next meeting date, and pairing for existing users.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from usandours.db.session import get_db
from usandours.core.security import create_session_token
from usandours.models.couple import Couple
from usandours.schemas.couple import (
    CoupleResponse, CoupleUpdate, CoupleUpdateResponse, JoinRequest, PairingResponse
)
from usandours.schemas.user import PartnerResponse, SessionUser
from usandours.services import auth_service, event_service, pairing_service
from usandours.api.dependencies import get_current_user, set_session_cookie

router = APIRouter(prefix="/couple", tags=["couple"])


def build_couple_response(couple: Couple) -> CoupleResponse:
    return CoupleResponse(
        id=couple.id,
        secret_code=couple.secret_code,
        partner1=PartnerResponse.model_validate(couple.partner1),
        partner2=PartnerResponse.model_validate(couple.partner2) if couple.partner2 else None,
        next_meeting_date=couple.next_meeting_date,
        created_at=couple.created_at
    )


@router.get("", response_model=CoupleResponse)
async def get_couple(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get the caller's room: secret code, partners and next meeting date."""
    couple = pairing_service.get_room(db, current_user.couple_id)
    return build_couple_response(couple)


@router.patch("", response_model=CoupleUpdateResponse)
async def update_couple(
    data: CoupleUpdate,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set (or clear) the next meeting date. Setting it also adds a calendar event."""
    if "next_meeting_date" not in data.model_fields_set:
        couple = pairing_service.get_room(db, current_user.couple_id)
        return CoupleUpdateResponse(couple=build_couple_response(couple))

    couple = pairing_service.update_next_meeting(db, current_user.couple_id, data.next_meeting_date)

    if couple.next_meeting_date:
        # The stored value is naive UTC, so its calendar day is the UTC day
        await event_service.schedule_next_meeting(db, couple.id, couple.next_meeting_date.date())
        db.refresh(couple)

    return CoupleUpdateResponse(couple=build_couple_response(couple))


@router.post("", response_model=PairingResponse, status_code=status.HTTP_201_CREATED)
async def create_couple(
    response: Response,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a room for a signed-in user who is not paired yet."""
    couple = pairing_service.create_room(db, current_user.user_id)
    return _pairing_response(db, response, current_user.user_id, couple)


@router.post("/join", response_model=PairingResponse)
async def join_couple(
    data: JoinRequest,
    response: Response,
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Join a partner's room with their secret code."""
    couple = pairing_service.join_room(db, data.secret_code, current_user.user_id)
    return _pairing_response(db, response, current_user.user_id, couple)


def _pairing_response(db: Session, response: Response, user_id: int, couple: Couple) -> PairingResponse:
    # Re-issue the token so it carries the new couple id
    user = auth_service.get_user(db, user_id)
    token = create_session_token(user)
    set_session_cookie(response, token)
    return PairingResponse(couple_id=couple.id, secret_code=couple.secret_code, access_token=token)
