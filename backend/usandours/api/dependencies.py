"""
Shared route dependencies.
"""
from fastapi import Depends, Request, Response
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from usandours.core.config import settings
from usandours.core.security import verify_session_token
from usandours.schemas.user import SessionUser

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> SessionUser:
    """
    Identity from the session token.

    The httpOnly cookie wins over an Authorization bearer header; both carry
    the same token.
    """
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials
    return verify_session_token(token)


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
