# app/models/profile.py
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Profile(SQLModel, table=True):
    """
    A household member under one user account.

    A profile named like settings.GUEST_PROFILE_NAME ("Guest") may browse
    but cannot remove favorites.
    """

    __tablename__ = "profiles"

    profile_id: int | None = Field(default=None, primary_key=True)

    user_id: int = Field(
        foreign_key="users.user_id",
        index=True,
    )

    profile_name: str = Field(max_length=50)

    created_at: datetime = Field(
        sa_type=DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
    )
