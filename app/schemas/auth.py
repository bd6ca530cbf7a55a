# app/schemas/auth.py
from datetime import datetime

from pydantic import BaseModel


class OAuthProfile(BaseModel):
    """Identity reported by the external provider after a successful login."""

    provider: str = "google"
    external_id: str
    email: str | None = None
    display_name: str | None = None


class SessionIdentity(BaseModel):
    """
    Minimal identity attached to an authenticated request.

    Only the internal user id is carried; user details are re-read from
    storage when a route needs them.
    """

    user_id: int
    session_id: str
    expires_at: datetime


class AuthStatus(BaseModel):
    authenticated: bool
    email: str | None = None


class Message(BaseModel):
    message: str
