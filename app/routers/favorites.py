# app/routers/favorites.py
from typing import Any

from fastapi import APIRouter, Depends, status

from app.core.auth import get_current_identity
from app.database import get_db
from app.dependencies import get_favorite_service
from app.schemas.auth import Message, SessionIdentity
from app.schemas.favorite import FavoriteCreate, FavoriteRead
from app.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.post("", response_model=FavoriteRead, status_code=status.HTTP_201_CREATED)
def add_favorite(
    payload: FavoriteCreate,
    db: Any = Depends(get_db),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    Add a movie to a profile's favorites.

    The user is looked up by the `email` in the body; no session needed.
    """
    return service.add_favorite(db, payload)


@router.delete("/{movie_id}/{profile_id}", response_model=Message)
def remove_favorite(
    movie_id: int,
    profile_id: int,
    db: Any = Depends(get_db),
    identity: SessionIdentity | None = Depends(get_current_identity),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    Remove a movie from the signed-in user's profile favorites.

    Auth:
      - Requires a live session.
      - The Guest profile cannot remove favorites.
    """
    service.remove_favorite(db, identity, movie_id, profile_id)
    return Message(message="Movie removed from favorites")


@router.get("", response_model=list[FavoriteRead])
def list_favorites(
    profile_id: int | None = None,
    db: Any = Depends(get_db),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    List favorites of a profile.

    An empty result is reported as 404.
    """
    return service.list_favorites(db, profile_id)
