"""
Pairing service: room (couple) creation, secret-code joining and lookup.
"""
from sqlalchemy.orm import Session
from sqlalchemy import update
from datetime import datetime
from typing import Optional
import secrets
import logging
from usandours.core.config import settings
from usandours.core.exceptions import ConflictError, NotFoundError, RoomFullError, ValidationError
from usandours.models.couple import Couple
from usandours.models.user import User

logger = logging.getLogger(__name__)


def normalize_code(code: Optional[str]) -> str:
    """Secret codes are compared case-insensitively and stored upper-case."""
    return (code or "").strip().upper()


def generate_secret_code() -> str:
    """Random code, e.g. 'A1B2C3' for the default 3 bytes."""
    return secrets.token_hex(settings.SECRET_CODE_BYTES).upper()


def _unique_secret_code(db: Session) -> str:
    """Generate a code not used by any existing room (regenerate on collision)."""
    for _ in range(settings.SECRET_CODE_MAX_ATTEMPTS):
        code = generate_secret_code()
        exists = db.query(Couple.id).filter(Couple.secret_code == code).first()
        if not exists:
            return code
        logger.warning("Secret code collision, regenerating")
    raise ConflictError("Could not allocate a unique secret code")


def create_room(db: Session, first_user_id: int, commit: bool = True) -> Couple:
    """
    Create a room with `first_user_id` as partner1 and link the user to it.

    Raises ConflictError if the user already belongs to a room.
    """
    user = db.query(User).filter(User.id == first_user_id).first()
    if not user:
        raise NotFoundError("User not found")
    if user.couple_id is not None:
        raise ConflictError("User is already in a couple")

    couple = Couple(
        partner1_id=user.id,
        secret_code=_unique_secret_code(db)
    )
    db.add(couple)
    db.flush()

    user.couple_id = couple.id
    db.flush()

    if commit:
        db.commit()
        db.refresh(couple)

    logger.info(f"Created couple {couple.id} for user {user.id}")
    return couple


def _claim_second_slot(db: Session, couple_id: int, user_id: int) -> bool:
    """
    Fill partner2 only if it is still empty.

    A single conditional UPDATE, so of two concurrent joins only one can
    match the row; the other sees rowcount 0.
    """
    result = db.execute(
        update(Couple)
        .where(Couple.id == couple_id, Couple.partner2_id.is_(None))
        .values(partner2_id=user_id, updated_at=datetime.utcnow())
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def join_room(db: Session, code: Optional[str], joining_user_id: int, commit: bool = True) -> Couple:
    """
    Attach `joining_user_id` to the room identified by `code` as partner2.

    Raises NotFoundError for an unknown code and RoomFullError when both slots
    are taken. A join that loses the slot to a concurrent join rolls the
    session back.
    """
    normalized = normalize_code(code)
    if not normalized:
        raise ValidationError("Secret code required")

    couple = db.query(Couple).filter(Couple.secret_code == normalized).first()
    if not couple:
        raise NotFoundError("Invalid Secret Code")

    if couple.is_full:
        raise RoomFullError()

    user = db.query(User).filter(User.id == joining_user_id).first()
    if not user:
        raise NotFoundError("User not found")
    if user.couple_id is not None or couple.partner1_id == user.id:
        raise ConflictError("User is already in a couple")

    if not _claim_second_slot(db, couple.id, user.id):
        db.rollback()
        logger.info(f"Join race lost for couple {couple.id}")
        raise RoomFullError()

    user.couple_id = couple.id
    db.flush()

    if commit:
        db.commit()
    db.refresh(couple)

    logger.info(f"User {user.id} joined couple {couple.id}")
    return couple


def get_room_for_user(db: Session, user_id: int) -> Optional[Couple]:
    """Return the user's room, or None when the user is not paired."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user or user.couple_id is None:
        return None
    return db.query(Couple).filter(Couple.id == user.couple_id).first()


def get_room(db: Session, couple_id: Optional[int]) -> Couple:
    """Fetch a room by id, raising NotFoundError when absent."""
    if couple_id is None:
        raise NotFoundError("Couple not found or User not in a couple")
    couple = db.query(Couple).filter(Couple.id == couple_id).first()
    if not couple:
        raise NotFoundError("Couple not found")
    return couple


def update_next_meeting(db: Session, couple_id: Optional[int], next_meeting_date: Optional[datetime]) -> Couple:
    """Set or clear the shared next meeting timestamp."""
    couple = get_room(db, couple_id)
    couple.next_meeting_date = next_meeting_date
    db.commit()
    db.refresh(couple)
    return couple
