# app/schemas/favorite.py
from datetime import datetime

from pydantic import field_validator
from sqlmodel import SQLModel


class FavoriteCreate(SQLModel):
    """
    Payload for POST /favorites.

    The owning user is identified by email, not by the session.
    email/profile_id/movie_id are optional here so that missing values
    produce the API's 400 message rather than a schema error.
    """

    email: str | None = None
    profile_id: int | None = None
    movie_id: int | None = None
    movie_poster: str | None = None
    movie_title: str | None = None
    movie_year: str | None = None

    @field_validator("movie_year", mode="before")
    @classmethod
    def year_as_text(cls, v):
        # Clients send either "1999" or 1999.
        if isinstance(v, int):
            return str(v)
        return v


class FavoriteRead(SQLModel):
    """Response schema for a single favorite."""

    user_id: int
    profile_id: int
    movie_id: int
    movie_poster: str | None = None
    movie_title: str | None = None
    movie_year: str | None = None
    created_at: datetime | None = None
