# app/schemas/profile.py
from datetime import datetime

from sqlmodel import SQLModel


class ProfileCreate(SQLModel):
    """
    Payload for creating a profile under a user account.

    Unknown fields are ignored. A missing user_id or profile_name is left
    for the store to reject (NOT NULL), like any other failed insert.
    """

    user_id: int | None = None
    profile_name: str | None = None


class ProfileRename(SQLModel):
    """
    Payload for PUT /profiles/{profile_id}.

    Fields are optional so that a missing name maps to 400 in the service
    instead of a schema error.
    """

    profile_name: str | None = None


class ProfileUpdate(ProfileRename):
    """
    Payload for the body-keyed PUT /profiles.
    """

    profile_id: int | None = None


class ProfileRead(SQLModel):
    """Response schema for a profile."""

    profile_id: int
    user_id: int
    profile_name: str
    created_at: datetime | None = None
