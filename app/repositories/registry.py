# app/repositories/registry.py
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from app.core.config import get_settings
from app.repositories.favorite_repo import FavoriteRepository
from app.repositories.profile_repo import ProfileRepository
from app.repositories.session_repo import SessionRepository
from app.repositories.supabase_repo import (
    SupabaseFavoriteRepository,
    SupabaseProfileRepository,
    SupabaseSessionRepository,
    SupabaseUserRepository,
)
from app.repositories.user_repo import UserRepository


@dataclass(frozen=True)
class Repositories:
    """The Domain Store: one repository per table, all for the same backend."""

    users: Any
    profiles: Any
    favorites: Any
    sessions: Any


@lru_cache
def build_repositories(backend: str) -> Repositories:
    """Repositories are stateless, so one set per backend is enough."""
    if backend == "sql":
        return Repositories(
            users=UserRepository(),
            profiles=ProfileRepository(),
            favorites=FavoriteRepository(),
            sessions=SessionRepository(),
        )
    if backend == "supabase":
        return Repositories(
            users=SupabaseUserRepository(),
            profiles=SupabaseProfileRepository(),
            favorites=SupabaseFavoriteRepository(),
            sessions=SupabaseSessionRepository(),
        )
    raise ValueError(f"Unknown store backend: {backend}")


def get_repositories() -> Repositories:
    """FastAPI dependency returning the repositories for STORE_BACKEND."""
    return build_repositories(get_settings().STORE_BACKEND)
