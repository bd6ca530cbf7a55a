"""Unit tests for the Supabase repositories against a fake PostgREST client."""

from datetime import datetime, timezone
from types import SimpleNamespace

from app.models.favorite import Favorite
from app.models.profile import Profile
from app.repositories.supabase_repo import (
    SupabaseFavoriteRepository,
    SupabaseProfileRepository,
    SupabaseSessionRepository,
    SupabaseUserRepository,
)


class FakeQuery:
    """Records builder calls and returns canned rows from execute()."""

    def __init__(self, table, rows):
        self.table = table
        self.rows = rows
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return method

    def execute(self):
        return SimpleNamespace(data=self.rows)

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


class FakeClient:
    """client.table(name) hands out queued responses in call order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.queries = []

    def table(self, name):
        query = FakeQuery(name, self.responses.pop(0))
        self.queries.append(query)
        return query


USER_ROW = {
    "user_id": 1,
    "email": "a@b.com",
    "name": "Alice",
    "created_at": "2024-01-01T00:00:00+00:00",
}


class TestUsers:

    def test_get_by_email(self):
        client = FakeClient([USER_ROW])

        user = SupabaseUserRepository().get_by_email(client, "a@b.com")

        assert user.user_id == 1
        assert client.queries[0].called("eq") == [("eq", ("email", "a@b.com"), {})]

    def test_get_by_email_missing(self):
        assert SupabaseUserRepository().get_by_email(FakeClient([]), "x@y.z") is None

    def test_upsert_ignores_duplicates(self):
        client = FakeClient([], [USER_ROW])

        user, created = SupabaseUserRepository().upsert_by_email(client, "a@b.com", "Alice")

        assert created is False
        assert user.email == "a@b.com"
        _, args, kwargs = client.queries[0].called("upsert")[0]
        assert args[0] == {"email": "a@b.com", "name": "Alice"}
        assert kwargs == {"on_conflict": "email", "ignore_duplicates": True}

    def test_upsert_reports_creation(self):
        client = FakeClient([USER_ROW], [USER_ROW])

        _, created = SupabaseUserRepository().upsert_by_email(client, "a@b.com", "Alice")

        assert created is True


class TestFavorites:

    def test_insert_conflict_returns_none(self):
        client = FakeClient([])
        favorite = Favorite(user_id=1, profile_id=2, movie_id=3, movie_title="X")

        assert SupabaseFavoriteRepository().insert_if_absent(client, favorite) is None
        _, args, kwargs = client.queries[0].called("upsert")[0]
        assert kwargs["on_conflict"] == "user_id,profile_id,movie_id"
        assert args[0]["movie_title"] == "X"

    def test_insert_returns_stored_row(self):
        row = {"user_id": 1, "profile_id": 2, "movie_id": 3, "movie_title": "X"}
        client = FakeClient([row])

        created = SupabaseFavoriteRepository().insert_if_absent(
            client, Favorite(user_id=1, profile_id=2, movie_id=3, movie_title="X")
        )

        assert created.movie_id == 3

    def test_delete_counts_rows(self):
        client = FakeClient([{"movie_id": 3}])

        assert SupabaseFavoriteRepository().delete(client, 1, 2, 3) == 1
        assert len(client.queries[0].called("eq")) == 3

    def test_delete_nothing(self):
        assert SupabaseFavoriteRepository().delete(FakeClient([]), 1, 2, 3) == 0


class TestProfiles:

    def test_update_missing_returns_none(self):
        assert SupabaseProfileRepository().update_name(FakeClient([]), 9, "New") is None

    def test_create(self):
        row = {"profile_id": 5, "user_id": 1, "profile_name": "Kids"}
        client = FakeClient([row])

        profile = SupabaseProfileRepository().create(client, Profile(user_id=1, profile_name="Kids"))

        assert profile.profile_id == 5
        sent = client.queries[0].called("insert")[0][1][0]
        assert "profile_id" not in sent

    def test_delete_removes_favorites_first(self):
        client = FakeClient([], [{"profile_id": 5}])

        removed = SupabaseProfileRepository().delete(client, 5)

        assert removed == 1
        assert [q.table for q in client.queries] == ["favorites", "profiles"]


class TestSessions:

    def test_delete_expired_filters_on_expiry(self):
        client = FakeClient([{"session_id": "a"}, {"session_id": "b"}])
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)

        removed = SupabaseSessionRepository().delete_expired_for_user(client, 1, now)

        assert removed == 2
        assert client.queries[0].called("lte") == [("lte", ("expires_at", now.isoformat()), {})]
