"""
Session issuance: registration (create/join a room), login and profile lookup.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional, Tuple
import logging
from usandours.core.exceptions import (
    AppError, AlreadyExistsError, InvalidCredentialsError, NotFoundError, ValidationError
)
from usandours.core.security import verify_password, get_password_hash, create_session_token
from usandours.models.user import User
from usandours.schemas.user import RegisterRequest
from usandours.services import pairing_service

logger = logging.getLogger(__name__)

ACTION_CREATE = "create"
ACTION_JOIN = "join"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def authenticate(db: Session, email: str, password: str) -> Tuple[User, str]:
    """
    Check credentials and mint a session token.

    Unknown email and wrong password both raise InvalidCredentialsError.
    """
    user = get_user_by_email(db, email or "")
    if not user or not verify_password(password or "", user.hashed_password):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()

    return user, create_session_token(user)


def register(db: Session, data: RegisterRequest) -> Tuple[User, str, Optional[str]]:
    """
    Register a user and create or join a room in one transaction.

    Returns (user, token, secret_code); secret_code is only set for "create".
    """
    name = (data.name or "").strip()
    if not name or not data.email or not data.password:
        raise ValidationError("Missing required fields")
    if data.action not in (ACTION_CREATE, ACTION_JOIN):
        raise ValidationError("Invalid action")
    if data.action == ACTION_JOIN and not pairing_service.normalize_code(data.secret_code):
        raise ValidationError("Secret code required")

    if get_user_by_email(db, data.email):
        raise AlreadyExistsError()

    user = User(
        name=name,
        email=normalize_email(data.email),
        hashed_password=get_password_hash(data.password)
    )

    secret_code = None
    try:
        db.add(user)
        db.flush()

        if data.action == ACTION_CREATE:
            couple = pairing_service.create_room(db, user.id, commit=False)
            secret_code = couple.secret_code
        else:
            pairing_service.join_room(db, data.secret_code, user.id, commit=False)

        db.commit()
    except AppError:
        db.rollback()
        raise
    except IntegrityError:
        # Lost a race on the unique email
        db.rollback()
        raise AlreadyExistsError()

    db.refresh(user)
    logger.info(f"Registered user {user.id} ({data.action}) in couple {user.couple_id}")
    return user, create_session_token(user), secret_code


def update_google_tokens(
    db: Session,
    user_id: int,
    access_token: Optional[str],
    refresh_token: Optional[str] = None,
    google_id: Optional[str] = None
) -> User:
    """Store Google tokens for a user. A missing refresh token keeps the stored one."""
    user = get_user(db, user_id)
    if google_id:
        user.google_id = google_id
    if access_token:
        user.google_access_token = access_token
    if refresh_token:
        user.google_refresh_token = refresh_token
    db.commit()
    db.refresh(user)
    return user
