# app/services/user_service.py
from typing import Any

from fastapi import HTTPException, status

from app.core.errors import storage_errors
from app.models.user import User


class UserService:
    """Read-only user lookups. Users are created by the identity resolver."""

    def __init__(self, repo):
        self.repo = repo

    def get_by_email(self, db: Any, email: str | None) -> User:
        """
        Raises:
            HTTPException(404): if not found.
        """
        user = None
        if email:
            with storage_errors("Internal server error"):
                user = self.repo.get_by_email(db, email)

        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return user

    def get_user(self, db: Any, user_id: int) -> User | None:
        return self.repo.get_by_id(db, user_id)
