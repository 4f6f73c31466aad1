"""
Google OAuth and Google Calendar sync.

Calendar sync is best-effort: every failure is logged and swallowed so the
event/couple write that triggered it still succeeds.
"""
from sqlalchemy.orm import Session
from datetime import date, timedelta
from typing import Any, Dict, Optional
from urllib.parse import urlencode
import httpx
import logging
from usandours.core.config import settings
from usandours.core.exceptions import UpstreamError
from usandours.models.couple import Couple
from usandours.models.user import User
from usandours.services import auth_service

logger = logging.getLogger(__name__)

GOOGLE_SCOPES = [
    "openid",
    "profile",
    "email",
    "https://www.googleapis.com/auth/calendar",
]
DEFAULT_DESCRIPTION = "Planned via Us & Ours App"


def is_configured() -> bool:
    return bool(settings.GOOGLE_CLIENT_ID and settings.GOOGLE_CLIENT_SECRET)


def build_authorization_url(state: str) -> str:
    """Consent screen URL asking for offline calendar access."""
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "redirect_uri": settings.GOOGLE_CALLBACK_URL,
        "response_type": "code",
        "scope": " ".join(GOOGLE_SCOPES),
        "access_type": "offline",
        "prompt": "consent",
        "state": state,
    }
    return f"{settings.GOOGLE_AUTH_URL}?{urlencode(params)}"


async def _post_token_endpoint(data: Dict[str, str]) -> Dict[str, Any]:
    try:
        async with httpx.AsyncClient(timeout=settings.GOOGLE_TIMEOUT_SECONDS) as client:
            response = await client.post(settings.GOOGLE_TOKEN_URL, data=data)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"Google token endpoint error: {e.response.status_code}")
        raise UpstreamError(f"Google token endpoint HTTP error: {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"Google token endpoint network error: {e}")
        raise UpstreamError("Google token endpoint network error")
    except ValueError:
        logger.error("Google token endpoint returned a non-JSON body")
        raise UpstreamError("Google token endpoint returned an invalid response")


async def exchange_code(code: str) -> Dict[str, Any]:
    """Exchange an authorization code for access/refresh tokens."""
    return await _post_token_endpoint({
        "code": code,
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "redirect_uri": settings.GOOGLE_CALLBACK_URL,
        "grant_type": "authorization_code",
    })


async def refresh_access_token(refresh_token: str) -> str:
    """Obtain a fresh access token from a stored refresh token."""
    data = await _post_token_endpoint({
        "refresh_token": refresh_token,
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "grant_type": "refresh_token",
    })
    access_token = data.get("access_token")
    if not access_token:
        raise UpstreamError("Google did not return an access token")
    return access_token


async def fetch_profile(access_token: str) -> Dict[str, Any]:
    """Google account id ("sub") and email for the consenting user."""
    try:
        async with httpx.AsyncClient(timeout=settings.GOOGLE_TIMEOUT_SECONDS) as client:
            response = await client.get(
                settings.GOOGLE_USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"}
            )
            response.raise_for_status()
            return response.json()
    except httpx.HTTPError as e:
        logger.error(f"Google userinfo error: {e}")
        raise UpstreamError("Could not read Google profile")
    except ValueError:
        logger.error("Google userinfo returned a non-JSON body")
        raise UpstreamError("Could not read Google profile")


def link_google_account(db: Session, user_id: int, profile: Dict[str, Any], tokens: Dict[str, Any]) -> User:
    """
    Attach a Google account to the user who started the OAuth flow.

    The Google email must match the account email, and a Google account
    already linked to someone else is refused.
    """
    user = auth_service.get_user(db, user_id)
    google_id = profile.get("sub") or profile.get("id")
    google_email = (profile.get("email") or "").strip().lower()

    if not google_id:
        raise UpstreamError("Google profile has no id")
    if google_email != user.email:
        logger.info(f"Google email mismatch for user {user.id}")
        raise UpstreamError(f"Please sign in with {user.email}")

    owner = db.query(User).filter(User.google_id == google_id).first()
    if owner and owner.id != user.id:
        raise UpstreamError("This Google account is linked to another user")

    if not tokens.get("refresh_token"):
        logger.warning(f"No refresh token received from Google for user {user.id}")

    return auth_service.update_google_tokens(
        db,
        user.id,
        access_token=tokens.get("access_token"),
        refresh_token=tokens.get("refresh_token"),
        google_id=google_id,
    )


def build_calendar_event(title: str, day: date, description: Optional[str] = None) -> Dict[str, Any]:
    """All-day event body. Google treats the end date as exclusive."""
    return {
        "summary": f"❤️ {title}",
        "description": description or DEFAULT_DESCRIPTION,
        "start": {"date": day.isoformat()},
        "end": {"date": (day + timedelta(days=1)).isoformat()},
    }


async def add_event_to_google_calendar(
    db: Session,
    user_id: int,
    title: str,
    day: date,
    description: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Insert an all-day event in the user's primary Google calendar.

    Returns the created event, or None when the user has no Google link or
    the call failed.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user or not (user.google_refresh_token or user.google_access_token):
        logger.info(f"User {user_id} has no Google Calendar connected. Skipping sync.")
        return None

    try:
        access_token = user.google_access_token
        if user.google_refresh_token:
            access_token = await refresh_access_token(user.google_refresh_token)
            if access_token != user.google_access_token:
                auth_service.update_google_tokens(db, user.id, access_token=access_token)

        async with httpx.AsyncClient(timeout=settings.GOOGLE_TIMEOUT_SECONDS) as client:
            response = await client.post(
                settings.GOOGLE_CALENDAR_URL,
                headers={"Authorization": f"Bearer {access_token}"},
                json=build_calendar_event(title, day, description)
            )
            response.raise_for_status()
            created = response.json()

        logger.info(f"Calendar event created for user {user_id}: {created.get('htmlLink')}")
        return created

    except httpx.HTTPStatusError as e:
        logger.error(f"Calendar sync HTTP error for user {user_id}: {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"Calendar sync network error for user {user_id}: {e}")
    except UpstreamError as e:
        logger.error(f"Calendar sync failed for user {user_id}: {e.message}")
    except Exception as e:
        logger.error(f"Unexpected calendar sync error for user {user_id}: {e}", exc_info=True)
    return None


async def sync_event_for_couple(
    db: Session,
    couple: Optional[Couple],
    title: str,
    day: date,
    description: Optional[str] = None
) -> int:
    """Push an event to each partner's calendar. Returns how many inserts succeeded."""
    if couple is None:
        return 0

    synced = 0
    for member_id in couple.member_ids:
        if await add_event_to_google_calendar(db, member_id, title, day, description):
            synced += 1
    return synced
