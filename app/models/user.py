# app/models/user.py
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Application user, created on first successful Google sign-in.

    Identity:
      - user_id: internal surrogate key, referenced by profiles/favorites/sessions
      - email: unique; the key used to match an external Google profile

    Users are never deleted by the API.
    """

    __tablename__ = "users"

    user_id: int | None = Field(default=None, primary_key=True)

    email: str = Field(
        unique=True,
        index=True,
        description="Email reported by the identity provider",
    )

    name: str | None = Field(
        default=None,
        description="Display name from the identity provider",
    )

    created_at: datetime = Field(
        sa_type=DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
