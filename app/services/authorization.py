# app/services/authorization.py
from enum import Enum

from fastapi import HTTPException, status

from app.core.config import get_settings
from app.schemas.auth import SessionIdentity

settings = get_settings()


class Action(str, Enum):
    AUTHENTICATED = "authenticated"
    REMOVE_FAVORITE = "remove_favorite"


# One 403 message per action, whether the caller is anonymous or a Guest.
DENIED_MESSAGES = {
    Action.AUTHENTICATED: "User not authenticated",
    Action.REMOVE_FAVORITE: "Guests cannot remove favorites.",
}


def can_perform(
    identity: SessionIdentity | None,
    action: Action,
    profile_name: str | None = None,
    guest_profile_name: str | None = None,
) -> bool:
    """
    Pure authorization check, no I/O.

    - Every action needs an identity.
    - REMOVE_FAVORITE is denied for the Guest profile, authenticated or not.
    """
    if identity is None:
        return False
    if action is Action.REMOVE_FAVORITE:
        guest = guest_profile_name or settings.GUEST_PROFILE_NAME
        if profile_name == guest:
            return False
    return True


def ensure_can_perform(
    identity: SessionIdentity | None,
    action: Action,
    profile_name: str | None = None,
) -> SessionIdentity:
    """
    Raise 403 unless can_perform() allows the action.

    Returns:
        The identity, narrowed to non-None.
    """
    if not can_perform(identity, action, profile_name):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=DENIED_MESSAGES[action],
        )
    return identity
