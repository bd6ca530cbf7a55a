# app/routers/auth.py
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from app.core.auth import (
    clear_session_cookie,
    get_session_token,
    require_auth,
    set_session_cookie,
)
from app.core.config import get_settings
from app.core.errors import STORAGE_ERRORS
from app.core.oauth import GoogleOAuthClient, OAuthError, get_oauth_client, issue_state, verify_state
from app.database import get_db
from app.dependencies import get_identity_service, get_session_service, get_user_service
from app.schemas.auth import AuthStatus, Message, SessionIdentity
from app.services.identity_service import IdentityService
from app.services.session_service import SessionService
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Auth"])

settings = get_settings()
logger = logging.getLogger(__name__)


@router.get("/google")
def login_with_google(oauth: GoogleOAuthClient = Depends(get_oauth_client)):
    """
    Start Google sign-in.

    Redirects the browser to Google's consent screen with a signed state.
    """
    url = oauth.build_authorization_url(issue_state())
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/google/callback")
def google_callback(
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    db: Any = Depends(get_db),
    oauth: GoogleOAuthClient = Depends(get_oauth_client),
    identity_service: IdentityService = Depends(get_identity_service),
    sessions: SessionService = Depends(get_session_service),
):
    """
    Google redirects here after consent.

    Success:
      - find or create the user by email
      - issue a session and set it as an HttpOnly cookie
      - 302 to the frontend

    Any failure (provider error, bad state, storage error) redirects to
    the configured failure URL; the caller is a browser, not an API client.
    """
    failure = RedirectResponse(settings.failure_redirect_url, status_code=status.HTTP_302_FOUND)

    if error:
        logger.warning("Google sign-in was not completed: %s", error)
        return failure
    if not code or not verify_state(state):
        logger.warning("Rejected OAuth callback with missing code or invalid state")
        return failure

    try:
        external = oauth.authenticate(code)
        user = identity_service.resolve(db, external)
        token, _ = sessions.create(db, user)
    except OAuthError:
        logger.exception("Error in Google OAuth callback")
        return failure
    except STORAGE_ERRORS:
        logger.exception("Error adding user to database")
        return failure

    response = RedirectResponse(settings.FRONTEND_URL, status_code=status.HTTP_302_FOUND)
    set_session_cookie(response, token)
    return response


@router.get("/status", response_model=AuthStatus, response_model_exclude_none=True)
def auth_status(
    token: str | None = Depends(get_session_token),
    db: Any = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
    users: UserService = Depends(get_user_service),
):
    """
    Report whether the caller has a live session.

    Never fails: storage problems are logged and reported as signed out.
    """
    try:
        identity = sessions.resolve(db, token)
        user = users.get_user(db, identity.user_id) if identity else None
    except STORAGE_ERRORS:
        logger.exception("Could not resolve session for auth status")
        return AuthStatus(authenticated=False)

    if user is None:
        return AuthStatus(authenticated=False)
    return AuthStatus(authenticated=True, email=user.email)


@router.post("/logout", response_model=Message)
def logout(
    response: Response,
    identity: SessionIdentity = Depends(require_auth),
    token: str | None = Depends(get_session_token),
    db: Any = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
):
    """
    End the current session.

    Raises:
        HTTPException(403): no live session
        HTTPException(500): session could not be removed
    """
    try:
        sessions.revoke(db, token)
    except STORAGE_ERRORS:
        logger.exception("Logout failed for user %s", identity.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Logout failed",
        )

    clear_session_cookie(response)
    return Message(message="Logged out successfully")
