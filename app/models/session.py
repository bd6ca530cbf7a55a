# app/models/session.py
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class AuthSession(SQLModel, table=True):
    """
    Server-side record of an issued session token.

    session_id is the SHA-256 hex digest of the bearer token; the raw
    token only ever lives on the client. A row is valid until expires_at
    or until logout deletes it.
    """

    __tablename__ = "sessions"

    session_id: str = Field(primary_key=True, max_length=64)

    user_id: int = Field(
        foreign_key="users.user_id",
        index=True,
    )

    created_at: datetime = Field(
        sa_type=DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
    )

    expires_at: datetime = Field(
        sa_type=DateTime(timezone=True),
        description="Absolute expiry (UTC)",
    )
