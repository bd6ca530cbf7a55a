# app/routers/users.py
from typing import Any

from fastapi import APIRouter, Depends

from app.database import get_db
from app.dependencies import get_user_service
from app.schemas.user import UserRead
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=UserRead)
def get_user_by_email(
    email: str | None = None,
    db: Any = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    """
    Look up a user by email.

    The frontend uses this to turn the signed-in email into a user_id.
    """
    return service.get_by_email(db, email)
