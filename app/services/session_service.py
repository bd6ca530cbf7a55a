# app/services/session_service.py
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from app.models.session import AuthSession
from app.models.user import User
from app.schemas.auth import SessionIdentity

logger = logging.getLogger(__name__)


def hash_token(token: str) -> str:
    """Storage key for a bearer token. Raw tokens are never persisted."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionService:
    """
    Session lifecycle on top of the `sessions` table.

      login  -> create()  : new random token, row keyed by its digest
      request-> resolve() : token -> SessionIdentity, or None if unknown/expired
      logout -> revoke()  : delete the row

    Expiry is checked lazily on resolve(); stale rows of a user are
    reaped the next time that user logs in.
    """

    def __init__(self, repo, ttl_minutes: int):
        self.repo = repo
        self.ttl = timedelta(minutes=ttl_minutes)

    def create(self, db: Any, user: User) -> tuple[str, AuthSession]:
        """
        Issue a session for a resolved user.

        Returns:
            (raw token for the client, stored session row)
        """
        now = datetime.now(timezone.utc)
        token = secrets.token_urlsafe(32)

        reaped = self.repo.delete_expired_for_user(db, user.user_id, now)
        if reaped:
            logger.info("Removed %d expired session(s) for user %s", reaped, user.user_id)

        auth_session = AuthSession(
            session_id=hash_token(token),
            user_id=user.user_id,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self.repo.create(db, auth_session)
        return token, auth_session

    def resolve(self, db: Any, token: str | None) -> SessionIdentity | None:
        """
        Turn a presented token back into an identity.

        Missing, unknown and expired tokens all mean "not authenticated";
        none of them is an error.
        """
        if not token:
            return None

        auth_session = self.repo.get(db, hash_token(token))
        if auth_session is None:
            return None

        expires_at = _as_utc(auth_session.expires_at)
        if expires_at <= datetime.now(timezone.utc):
            return None

        return SessionIdentity(
            user_id=auth_session.user_id,
            session_id=auth_session.session_id,
            expires_at=expires_at,
        )

    def revoke(self, db: Any, token: str) -> int:
        """Invalidate a token. Returns the number of rows removed."""
        return self.repo.delete(db, hash_token(token))
