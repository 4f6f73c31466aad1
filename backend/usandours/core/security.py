"""
Security utilities for JWT session tokens and password hashing.
"""
from datetime import datetime, timedelta
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from usandours.core.config import settings
from usandours.core.exceptions import UnauthorizedError
from usandours.schemas.user import SessionUser

OAUTH_STATE_TYPE = "oauth_state"
OAUTH_STATE_EXPIRE_MINUTES = 10


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt (after a SHA256 pre-hash)."""
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token. Returns None if the signature or expiry is invalid."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None


def create_session_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """Mint the session assertion for a user: id, email, name and couple id."""
    return create_access_token(
        data={
            "userId": user.id,
            "email": user.email,
            "name": user.name,
            "coupleId": user.couple_id,
        },
        expires_delta=expires_delta,
    )


def verify_session_token(token: Optional[str]) -> SessionUser:
    """
    Verify a session assertion and return the identity it carries.

    Expired, tampered or malformed tokens raise UnauthorizedError. A payload
    missing any claim (or with ill-typed claims) is rejected as a whole.
    """
    if not token:
        raise UnauthorizedError("Not authorized, no token")

    payload = decode_access_token(token)
    if payload is None or payload.get("type") is not None:
        raise UnauthorizedError("Not authorized, token failed")

    try:
        return SessionUser.model_validate(payload)
    except PydanticValidationError:
        raise UnauthorizedError("Not authorized, token failed")


def create_oauth_state(user_id: int) -> str:
    """Short-lived signed state for the Google OAuth round trip."""
    return create_access_token(
        data={"userId": user_id, "type": OAUTH_STATE_TYPE},
        expires_delta=timedelta(minutes=OAUTH_STATE_EXPIRE_MINUTES),
    )


def verify_oauth_state(state: Optional[str]) -> int:
    """Return the user id named by an OAuth state token."""
    payload = decode_access_token(state) if state else None
    if not payload or payload.get("type") != OAUTH_STATE_TYPE:
        raise UnauthorizedError("Invalid OAuth state")
    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise UnauthorizedError("Invalid OAuth state")
    return user_id

