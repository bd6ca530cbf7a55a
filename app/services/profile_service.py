# app/services/profile_service.py
from typing import Any

from fastapi import HTTPException, status

from app.core.errors import storage_errors
from app.models.profile import Profile
from app.schemas.auth import SessionIdentity
from app.schemas.profile import ProfileCreate
from app.services.authorization import Action, ensure_can_perform

PROFILE_NAME_MAX_LENGTH = 50


def _check_name_length(name: str | None) -> None:
    if name and len(name) > PROFILE_NAME_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Profile name must be at most {PROFILE_NAME_MAX_LENGTH} characters.",
        )


class ProfileService:
    """
    Business logic for profiles.

    Update and delete are keyed by profile_id only; they are not scoped
    to the signed-in user.
    """

    def __init__(self, user_repo, profile_repo):
        self.user_repo = user_repo
        self.profile_repo = profile_repo

    def create_profile(self, db: Any, payload: ProfileCreate) -> Profile:
        name = payload.profile_name.strip() if payload.profile_name else payload.profile_name
        _check_name_length(name)

        with storage_errors("Failed to add profile"):
            profile = Profile(user_id=payload.user_id, profile_name=name)
            return self.profile_repo.create(db, profile)

    def list_my_profiles(self, db: Any, identity: SessionIdentity | None) -> list[Profile]:
        """Profiles of the signed-in user (possibly empty)."""
        identity = ensure_can_perform(identity, Action.AUTHENTICATED)

        with storage_errors("Internal server error"):
            user = self.user_repo.get_by_id(db, identity.user_id)
            if not user:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="User not found",
                )
            return self.profile_repo.list_by_user(db, user.user_id)

    def rename_profile(
        self, db: Any, profile_id: int | None, profile_name: str | None
    ) -> Profile:
        """
        Rename a profile.

        Raises:
            HTTPException(400): profile_id or profile_name missing/blank
            HTTPException(404): no such profile
        """
        name = (profile_name or "").strip()
        if not profile_id or not name:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Profile ID and name are required.",
            )
        _check_name_length(name)

        with storage_errors("Error updating profile."):
            profile = self.profile_repo.update_name(db, profile_id, name)

        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found.",
            )
        return profile

    def delete_profile(self, db: Any, profile_id: int) -> None:
        """Delete a profile and its favorites. 404 if nothing was removed."""
        with storage_errors("Failed to delete profile"):
            removed = self.profile_repo.delete(db, profile_id)

        if removed == 0:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found",
            )
