# app/schemas/user.py
from datetime import datetime

from sqlmodel import SQLModel


class UserRead(SQLModel):
    """
    Response schema returned to clients.

    email is plain text: it is whatever the identity provider reported,
    and the response must never be stricter than what is stored.
    """

    user_id: int
    email: str
    name: str | None = None
    created_at: datetime | None = None
