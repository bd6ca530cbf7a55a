# app/routers/profiles.py
from typing import Any

from fastapi import APIRouter, Depends, status

from app.core.auth import get_current_identity
from app.database import get_db
from app.dependencies import get_profile_service
from app.schemas.auth import Message, SessionIdentity
from app.schemas.profile import ProfileCreate, ProfileRead, ProfileRename, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.post("", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
def create_profile(
    payload: ProfileCreate,
    db: Any = Depends(get_db),
    service: ProfileService = Depends(get_profile_service),
):
    """Create a profile under `user_id`."""
    return service.create_profile(db, payload)


@router.get("", response_model=list[ProfileRead])
def list_my_profiles(
    db: Any = Depends(get_db),
    identity: SessionIdentity | None = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """
    List the signed-in user's profiles.

    Auth:
      - Requires a live session.
    """
    return service.list_my_profiles(db, identity)


@router.put("", response_model=ProfileRead)
def update_profile(
    payload: ProfileUpdate,
    db: Any = Depends(get_db),
    service: ProfileService = Depends(get_profile_service),
):
    """Rename a profile identified by `profile_id` in the body."""
    return service.rename_profile(db, payload.profile_id, payload.profile_name)


@router.put("/{profile_id}", response_model=ProfileRead)
def rename_profile(
    profile_id: int,
    payload: ProfileRename,
    db: Any = Depends(get_db),
    service: ProfileService = Depends(get_profile_service),
):
    """Rename a profile identified in the path."""
    return service.rename_profile(db, profile_id, payload.profile_name)


@router.delete("/{profile_id}", response_model=Message)
def delete_profile(
    profile_id: int,
    db: Any = Depends(get_db),
    service: ProfileService = Depends(get_profile_service),
):
    """Delete a profile and its favorites."""
    service.delete_profile(db, profile_id)
    return Message(message="Profile deleted successfully")
