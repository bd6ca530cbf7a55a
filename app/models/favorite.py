# app/models/favorite.py
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Favorite(SQLModel, table=True):
    """
    "This profile of this user favorited this movie."

    The composite primary key (user_id, profile_id, movie_id) is the
    uniqueness constraint: one row per movie per profile.
    Movie fields are a snapshot taken from the frontend's movie catalog.
    """

    __tablename__ = "favorites"

    user_id: int = Field(
        foreign_key="users.user_id",
        primary_key=True,
    )

    profile_id: int = Field(
        foreign_key="profiles.profile_id",
        primary_key=True,
        index=True,
    )

    movie_id: int = Field(primary_key=True)

    movie_poster: str | None = None
    movie_title: str | None = None
    movie_year: str | None = None

    created_at: datetime = Field(
        sa_type=DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
    )
