"""
Authentication routes: register, login, logout, profile, media signing and
Google account linking.
"""
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from typing import Optional
from urllib.parse import quote
import logging
from usandours.db.session import get_db
from usandours.core.config import settings
from usandours.core.exceptions import AppError
from usandours.core.security import create_oauth_state, verify_oauth_state
from usandours.schemas.user import (
    RegisterRequest, LoginRequest, AuthResponse, UserSummary, UserResponse,
    MeResponse, GoogleStatusResponse, CloudinarySignatureResponse, SessionUser
)
from usandours.services import auth_service, calendar_service, media_service
from usandours.api.dependencies import get_current_user, set_session_cookie, clear_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, response: Response, db: Session = Depends(get_db)):
    """Register and create a room ("create") or join one with a secret code ("join")."""
    user, token, secret_code = auth_service.register(db, data)
    set_session_cookie(response, token)

    return AuthResponse(
        user=UserSummary(name=user.name, email=user.email),
        secret_code=secret_code,
        access_token=token
    )


@router.post("/login", response_model=AuthResponse, response_model_exclude_none=True)
async def login(credentials: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Login and get a session token (cookie and body)."""
    user, token = auth_service.authenticate(db, credentials.email, credentials.password)
    set_session_cookie(response, token)

    return AuthResponse(
        user=UserSummary(name=user.name, email=user.email),
        access_token=token
    )


@router.post("/logout")
async def logout(response: Response, current_user: SessionUser = Depends(get_current_user)):
    """Clear the session cookie. Bearer clients simply drop the token."""
    clear_session_cookie(response)
    return {"success": True}


@router.get("/me", response_model=MeResponse)
async def get_me(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get the stored profile of the current user."""
    user = auth_service.get_user(db, current_user.user_id)
    return MeResponse(user=UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar or "",
        couple_id=user.couple_id,
        google_connected=bool(user.google_id),
        created_at=user.created_at
    ))


@router.get("/cloudinary-sign", response_model=CloudinarySignatureResponse)
async def cloudinary_sign(folder: Optional[str] = None, current_user: SessionUser = Depends(get_current_user)):
    """Signature for a direct browser upload to Cloudinary."""
    return CloudinarySignatureResponse(**media_service.sign_upload(folder))


@router.get("/google")
async def google_login(current_user: SessionUser = Depends(get_current_user)):
    """Redirect to Google's consent screen to connect the calendar."""
    if not calendar_service.is_configured():
        return _dashboard_redirect(error="Google Calendar is not configured")
    state = create_oauth_state(current_user.user_id)
    return RedirectResponse(calendar_service.build_authorization_url(state))


@router.get("/google/callback")
async def google_callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Finish the OAuth flow: store tokens and send the browser back to the dashboard."""
    if error or not code:
        logger.info(f"Google auth cancelled or failed: {error}")
        return _dashboard_redirect(error="Authentication failed")

    try:
        user_id = verify_oauth_state(state)
        tokens = await calendar_service.exchange_code(code)
        profile = await calendar_service.fetch_profile(tokens.get("access_token", ""))
        calendar_service.link_google_account(db, user_id, profile, tokens)
    except AppError as e:
        logger.info(f"Google auth failed: {e.message}")
        return _dashboard_redirect(error=e.message)

    logger.info(f"Google Calendar connected for user {user_id}")
    return _dashboard_redirect(success="calendar_connected")


@router.get("/google-status", response_model=GoogleStatusResponse)
async def google_status(current_user: SessionUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Whether the current user has connected Google Calendar."""
    user = auth_service.get_user(db, current_user.user_id)
    return GoogleStatusResponse(
        connected=bool(user.google_id),
        has_refresh_token=bool(user.google_refresh_token),
        has_access_token=bool(user.google_access_token),
        google_email=user.email or "N/A"
    )


def _dashboard_redirect(success: Optional[str] = None, error: Optional[str] = None) -> RedirectResponse:
    if error:
        query = f"error={quote(error)}"
    else:
        query = f"success={quote(success or '')}"
    return RedirectResponse(f"{settings.CLIENT_URL}/dashboard?{query}")
