# app/dependencies.py
"""
Service factories for FastAPI's dependency injection.

Services are built per request from the repositories of the configured
store backend; tests swap the backend by overriding `get_db` (and, if
needed, `get_repositories`).
"""
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.repositories.registry import Repositories, get_repositories
from app.services.favorite_service import FavoriteService
from app.services.identity_service import IdentityService
from app.services.profile_service import ProfileService
from app.services.session_service import SessionService
from app.services.user_service import UserService


def get_session_service(
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_settings),
) -> SessionService:
    return SessionService(repos.sessions, ttl_minutes=settings.SESSION_TTL_MINUTES)


def get_identity_service(repos: Repositories = Depends(get_repositories)) -> IdentityService:
    return IdentityService(repos.users)


def get_user_service(repos: Repositories = Depends(get_repositories)) -> UserService:
    return UserService(repos.users)


def get_profile_service(repos: Repositories = Depends(get_repositories)) -> ProfileService:
    return ProfileService(repos.users, repos.profiles)


def get_favorite_service(repos: Repositories = Depends(get_repositories)) -> FavoriteService:
    return FavoriteService(repos.users, repos.profiles, repos.favorites)
