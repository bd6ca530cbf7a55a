# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - GOOGLE_CLIENT_ID
      - GOOGLE_CLIENT_SECRET
      - SESSION_SECRET (signs OAuth state values)

    Storage:
      - STORE_BACKEND=sql      -> DATABASE_URL (Postgres or SQLite)
      - STORE_BACKEND=supabase -> SUPABASE_URL + SUPABASE_KEY
        (or SUPABASE_SERVICE_ROLE_KEY to bypass RLS)
    """

    PROJECT_NAME: str = "Movie Favorites API"
    API_PREFIX: str = ""
    PORT: int = 5001

    # Storage backend
    STORE_BACKEND: Literal["sql", "supabase"] = "sql"
    DATABASE_URL: str = "sqlite:///./movie_favorites.db"

    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None

    # Google OAuth
    GOOGLE_CLIENT_ID: str
    GOOGLE_CLIENT_SECRET: str
    GOOGLE_CALLBACK_URL: str = "http://localhost:5001/auth/google/callback"

    # Frontend redirects
    FRONTEND_URL: str = "http://localhost:3000"
    AUTH_FAILURE_REDIRECT_URL: str | None = None

    # Sessions
    SESSION_SECRET: str
    SESSION_TTL_MINUTES: int = 60 * 24 * 7
    SESSION_COOKIE_NAME: str = "session_token"
    SESSION_COOKIE_SECURE: bool = False

    # Profile with reduced rights (cannot remove favorites)
    GUEST_PROFILE_NAME: str = "Guest"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def failure_redirect_url(self) -> str:
        return self.AUTH_FAILURE_REDIRECT_URL or self.FRONTEND_URL


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
