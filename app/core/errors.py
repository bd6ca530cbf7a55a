# app/core/errors.py
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# Failures raised by either storage backend (SQLModel/SQLAlchemy or Supabase).
STORAGE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, APIError)


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """
    Map storage failures to a generic HTTP 500.

    The original exception is logged with its traceback; the client only
    sees `message`. HTTPExceptions raised inside the block pass through.

    Usage:
        with storage_errors("Failed to add profile"):
            profile = self.repo.create(db, profile)
    """
    try:
        yield
    except STORAGE_ERRORS:
        logger.exception(message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        )
