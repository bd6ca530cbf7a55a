# app/repositories/favorite_repo.py
from sqlalchemy import delete
from sqlmodel import Session, select

from app.models.favorite import Favorite
from app.repositories.sql_utils import insert_if_absent


class FavoriteRepository:
    """
    Data access layer for Favorite.

    Rows are addressed by the composite key (user_id, profile_id, movie_id).
    """

    def get(
        self, session: Session, user_id: int, profile_id: int, movie_id: int
    ) -> Favorite | None:
        return session.get(Favorite, (user_id, profile_id, movie_id))

    def list_for_profile(
        self, session: Session, user_id: int, profile_id: int
    ) -> list[Favorite]:
        stmt = (
            select(Favorite)
            .where(Favorite.user_id == user_id, Favorite.profile_id == profile_id)
            .order_by(Favorite.created_at)
        )
        return list(session.exec(stmt).all())

    def insert_if_absent(self, session: Session, favorite: Favorite) -> Favorite | None:
        """
        Insert the favorite in a single conditional write.

        Returns the stored row, or None if the movie was already a favorite
        of this profile.
        """
        values = favorite.model_dump()
        inserted = insert_if_absent(
            session,
            Favorite,
            values,
            conflict_columns=["user_id", "profile_id", "movie_id"],
        )
        if not inserted:
            return None
        return self.get(session, favorite.user_id, favorite.profile_id, favorite.movie_id)

    def delete(
        self, session: Session, user_id: int, profile_id: int, movie_id: int
    ) -> int:
        """Delete one favorite. Returns the number of rows removed."""
        stmt = delete(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.profile_id == profile_id,
            Favorite.movie_id == movie_id,
        )
        result = session.exec(stmt)
        session.commit()
        return result.rowcount
