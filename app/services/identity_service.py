# app/services/identity_service.py
import logging
from typing import Any

from app.core.oauth import OAuthError
from app.models.user import User
from app.schemas.auth import OAuthProfile

logger = logging.getLogger(__name__)


def _default_name_from_email(email: str) -> str:
    """
    Derive a default display name from email if the provider gave none.
    """
    if "@" in email:
        return email.split("@", 1)[0]
    return email


class IdentityService:
    """
    Maps an external (Google) profile to an internal User.

    Rules:
      - the email is the join key; at most one User per email
      - first sight creates the row, later logins return it unchanged
      - storage errors propagate; the OAuth callback turns them into a
        redirect to the failure page
    """

    def __init__(self, repo):
        self.repo = repo

    def resolve(self, db: Any, profile: OAuthProfile) -> User:
        email = (profile.email or "").strip()
        if not email:
            raise OAuthError(f"{profile.provider} profile {profile.external_id} has no email")

        name = profile.display_name or _default_name_from_email(email)
        user, created = self.repo.upsert_by_email(db, email, name)

        if created:
            logger.info("New user added: %s (%s)", email, name)
        else:
            logger.info("User already exists: %s", email)
        return user
