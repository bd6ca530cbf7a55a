# app/repositories/supabase_repo.py
"""
Supabase (PostgREST) implementations of the repositories.

Same method names and semantics as the SQLModel repositories; the first
argument is a supabase `Client` instead of a `Session`. Rows come back as
dicts and are converted to the SQLModel table classes so services don't
care which backend is active.

Expected tables mirror app/models (users.email unique, favorites primary
key on (user_id, profile_id, movie_id)).
"""
from datetime import datetime
from typing import Any

from supabase import Client

from app.models.favorite import Favorite
from app.models.profile import Profile
from app.models.session import AuthSession
from app.models.user import User


def _first(rows: list[dict[str, Any]]) -> dict[str, Any] | None:
    return rows[0] if rows else None


def _payload(model) -> dict[str, Any]:
    # JSON-safe row; drops unset autoincrement keys (None).
    return model.model_dump(mode="json", exclude_none=True)


class SupabaseUserRepository:

    table = "users"

    def get_by_id(self, client: Client, user_id: int) -> User | None:
        res = client.table(self.table).select("*").eq("user_id", user_id).limit(1).execute()
        row = _first(res.data)
        return User.model_validate(row) if row else None

    def get_by_email(self, client: Client, email: str) -> User | None:
        res = client.table(self.table).select("*").eq("email", email).limit(1).execute()
        row = _first(res.data)
        return User.model_validate(row) if row else None

    def upsert_by_email(self, client: Client, email: str, name: str | None) -> tuple[User, bool]:
        """
        Insert unless the email exists (ON CONFLICT (email) DO NOTHING).

        With ignore_duplicates the response is empty when the row existed.
        """
        res = (
            client.table(self.table)
            .upsert(
                {"email": email, "name": name},
                on_conflict="email",
                ignore_duplicates=True,
            )
            .execute()
        )
        created = bool(res.data)
        return self.get_by_email(client, email), created


class SupabaseProfileRepository:

    table = "profiles"

    def get_by_id(self, client: Client, profile_id: int) -> Profile | None:
        res = client.table(self.table).select("*").eq("profile_id", profile_id).limit(1).execute()
        row = _first(res.data)
        return Profile.model_validate(row) if row else None

    def list_by_user(self, client: Client, user_id: int) -> list[Profile]:
        res = (
            client.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .order("profile_id")
            .execute()
        )
        return [Profile.model_validate(row) for row in res.data]

    def create(self, client: Client, profile: Profile) -> Profile:
        res = client.table(self.table).insert(_payload(profile)).execute()
        return Profile.model_validate(res.data[0])

    def update_name(self, client: Client, profile_id: int, profile_name: str) -> Profile | None:
        res = (
            client.table(self.table)
            .update({"profile_name": profile_name})
            .eq("profile_id", profile_id)
            .execute()
        )
        row = _first(res.data)
        return Profile.model_validate(row) if row else None

    def delete(self, client: Client, profile_id: int) -> int:
        # Not transactional over PostgREST; favorites go first so the
        # profile delete never trips the foreign key.
        client.table("favorites").delete().eq("profile_id", profile_id).execute()
        res = client.table(self.table).delete().eq("profile_id", profile_id).execute()
        return len(res.data)


class SupabaseFavoriteRepository:

    table = "favorites"

    def get(
        self, client: Client, user_id: int, profile_id: int, movie_id: int
    ) -> Favorite | None:
        res = (
            client.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .eq("profile_id", profile_id)
            .eq("movie_id", movie_id)
            .limit(1)
            .execute()
        )
        row = _first(res.data)
        return Favorite.model_validate(row) if row else None

    def list_for_profile(self, client: Client, user_id: int, profile_id: int) -> list[Favorite]:
        res = (
            client.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .eq("profile_id", profile_id)
            .order("created_at")
            .execute()
        )
        return [Favorite.model_validate(row) for row in res.data]

    def insert_if_absent(self, client: Client, favorite: Favorite) -> Favorite | None:
        res = (
            client.table(self.table)
            .upsert(
                _payload(favorite),
                on_conflict="user_id,profile_id,movie_id",
                ignore_duplicates=True,
            )
            .execute()
        )
        row = _first(res.data)
        return Favorite.model_validate(row) if row else None

    def delete(self, client: Client, user_id: int, profile_id: int, movie_id: int) -> int:
        res = (
            client.table(self.table)
            .delete()
            .eq("user_id", user_id)
            .eq("profile_id", profile_id)
            .eq("movie_id", movie_id)
            .execute()
        )
        return len(res.data)


class SupabaseSessionRepository:

    table = "sessions"

    def get(self, client: Client, session_id: str) -> AuthSession | None:
        res = client.table(self.table).select("*").eq("session_id", session_id).limit(1).execute()
        row = _first(res.data)
        return AuthSession.model_validate(row) if row else None

    def create(self, client: Client, auth_session: AuthSession) -> AuthSession:
        res = client.table(self.table).insert(_payload(auth_session)).execute()
        return AuthSession.model_validate(res.data[0])

    def delete(self, client: Client, session_id: str) -> int:
        res = client.table(self.table).delete().eq("session_id", session_id).execute()
        return len(res.data)

    def delete_expired_for_user(self, client: Client, user_id: int, now: datetime) -> int:
        res = (
            client.table(self.table)
            .delete()
            .eq("user_id", user_id)
            .lte("expires_at", now.isoformat())
            .execute()
        )
        return len(res.data)
