# app/core/oauth.py
import secrets
import time
from functools import lru_cache
from urllib.parse import urlencode

import httpx
from jose import JWTError, jwt

from app.core.config import get_settings
from app.schemas.auth import OAuthProfile

settings = get_settings()

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"

STATE_TTL_SECONDS = 600
STATE_ALG = "HS256"


class OAuthError(Exception):
    """Provider rejected the login or returned an unusable profile."""


def issue_state() -> str:
    """
    Build a signed, short-lived `state` value for the authorization request.

    The state is self-verifying (HS256 over SESSION_SECRET), so nothing
    needs to be stored between the redirect and the callback.
    """
    claims = {
        "purpose": "oauth_state",
        "nonce": secrets.token_urlsafe(16),
        "exp": int(time.time()) + STATE_TTL_SECONDS,
    }
    return jwt.encode(claims, settings.SESSION_SECRET, algorithm=STATE_ALG)


def verify_state(state: str | None) -> bool:
    """Return True if `state` was issued by issue_state() and has not expired."""
    if not state:
        return False
    try:
        claims = jwt.decode(state, settings.SESSION_SECRET, algorithms=[STATE_ALG])
    except JWTError:
        return False
    return claims.get("purpose") == "oauth_state"


class GoogleOAuthClient:
    """
    Authorization-code flow against Google.

    Only the two provider round trips live here: code -> tokens and
    tokens -> userinfo. Mapping the profile to a User is the identity
    resolver's job.
    """

    name = "google"
    default_scopes = ("openid", "email", "profile")

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 10.0,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout

    def build_authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.default_scopes),
            "state": state,
            "include_granted_scopes": "true",
            "prompt": "select_account",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    def exchange_code(self, client: httpx.Client, code: str) -> dict:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        response = client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return response.json()

    def fetch_profile(self, client: httpx.Client, tokens: dict) -> OAuthProfile:
        access_token = tokens.get("access_token")
        if not access_token:
            raise OAuthError("Missing Google access token")
        headers = {"Authorization": f"Bearer {access_token}"}
        response = client.get(GOOGLE_PROFILE_URL, headers=headers)
        response.raise_for_status()
        data = response.json()
        if not data.get("sub"):
            raise OAuthError("Google profile has no subject id")
        return OAuthProfile(
            provider=self.name,
            external_id=data["sub"],
            email=data.get("email"),
            display_name=data.get("name"),
        )

    def authenticate(self, code: str) -> OAuthProfile:
        """
        Complete the login for an authorization `code`.

        Raises:
            OAuthError: provider returned an error or an incomplete profile.
        """
        try:
            with httpx.Client(timeout=self.timeout) as client:
                tokens = self.exchange_code(client, code)
                return self.fetch_profile(client, tokens)
        except httpx.HTTPError as exc:
            raise OAuthError(f"Google OAuth request failed: {exc}") from exc


@lru_cache
def get_oauth_client() -> GoogleOAuthClient:
    """FastAPI dependency: provider client built from settings."""
    return GoogleOAuthClient(
        client_id=settings.GOOGLE_CLIENT_ID,
        client_secret=settings.GOOGLE_CLIENT_SECRET,
        redirect_uri=settings.GOOGLE_CALLBACK_URL,
    )
