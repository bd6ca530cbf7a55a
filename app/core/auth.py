# app/core/auth.py
from typing import Any

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.errors import storage_errors
from app.database import get_db
from app.dependencies import get_session_service
from app.schemas.auth import SessionIdentity
from app.services.session_service import SessionService

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so anonymous routes (and the session cookie) still work.
bearer_scheme = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """
    Extract the session token from the request.

    Priority:
      1. Authorization: Bearer <token>  (API clients)
      2. session cookie set by the OAuth callback (browser)
    """
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_identity(
    token: str | None = Depends(get_session_token),
    db: Any = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
) -> SessionIdentity | None:
    """
    Resolve the caller's identity from the session token.

    Returns:
        SessionIdentity if the token maps to a live session, else None.
        Anonymous callers are not an error here; routes decide.

    Raises:
        HTTPException(500): session storage unavailable.
    """
    with storage_errors("Internal server error"):
        return sessions.resolve(db, token)


def require_auth(
    identity: SessionIdentity | None = Depends(get_current_identity),
) -> SessionIdentity:
    """
    Enforce authentication.

    Raises:
        HTTPException(403): if there is no live session.
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not authenticated",
        )
    return identity


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
