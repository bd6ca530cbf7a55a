# app/services/favorite_service.py
from typing import Any

from fastapi import HTTPException, status

from app.core.errors import storage_errors
from app.models.favorite import Favorite
from app.schemas.auth import SessionIdentity
from app.schemas.favorite import FavoriteCreate
from app.services.authorization import Action, ensure_can_perform


class FavoriteService:
    """
    Business logic for favorites.

    Responsibilities:
      - resolve the owning user (by email for adds, by session for removes)
      - keep (user_id, profile_id, movie_id) unique via a conditional insert
      - enforce the Guest-profile rule before removing
      - map empty results to 404 (an empty list is "not found")
    """

    def __init__(self, user_repo, profile_repo, favorite_repo):
        self.user_repo = user_repo
        self.profile_repo = profile_repo
        self.favorite_repo = favorite_repo

    def add_favorite(self, db: Any, payload: FavoriteCreate) -> Favorite:
        """
        Add a movie to a profile's favorites.

        Raises:
            HTTPException(400): email, profile_id or movie_id missing
            HTTPException(404): no user with that email
            HTTPException(409): movie already in this profile's favorites
        """
        if not payload.email or not payload.profile_id or not payload.movie_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email, profile_id, and movie_id are required",
            )

        with storage_errors("An error occurred while adding the favorite"):
            user = self.user_repo.get_by_email(db, payload.email)
            if not user:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="User not found",
                )

            favorite = Favorite(
                user_id=user.user_id,
                profile_id=payload.profile_id,
                movie_id=payload.movie_id,
                movie_poster=payload.movie_poster,
                movie_title=payload.movie_title,
                movie_year=payload.movie_year,
            )
            created = self.favorite_repo.insert_if_absent(db, favorite)

        if created is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="This movie is already in favorites",
            )
        return created

    def remove_favorite(
        self,
        db: Any,
        identity: SessionIdentity | None,
        movie_id: int,
        profile_id: int,
    ) -> None:
        """
        Remove a movie from the signed-in user's profile favorites.

        Raises:
            HTTPException(403): not signed in, or profile is the Guest profile
            HTTPException(404): user or favorite not found
        """
        identity = ensure_can_perform(identity, Action.REMOVE_FAVORITE)

        with storage_errors("Failed to remove favorite movie"):
            profile = self.profile_repo.get_by_id(db, profile_id)
            ensure_can_perform(
                identity,
                Action.REMOVE_FAVORITE,
                profile.profile_name if profile else None,
            )

            user = self.user_repo.get_by_id(db, identity.user_id)
            if not user:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="User not found",
                )

            removed = self.favorite_repo.delete(db, user.user_id, profile_id, movie_id)

        if removed == 0:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Favorite not found",
            )

    def list_favorites(self, db: Any, profile_id: int | None) -> list[Favorite]:
        """
        Favorites of a profile, scoped to the profile's owning user.

        Raises:
            HTTPException(400): profile_id missing
            HTTPException(404): unknown profile, or no favorites yet
        """
        if not profile_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Profile ID is required",
            )

        with storage_errors("An error occurred while fetching favorites"):
            profile = self.profile_repo.get_by_id(db, profile_id)
            if not profile:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="No user found for this profile",
                )
            favorites = self.favorite_repo.list_for_profile(db, profile.user_id, profile_id)

        if not favorites:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No favorites found for this profile",
            )
        return favorites
