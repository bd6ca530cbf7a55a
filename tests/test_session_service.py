"""Unit tests for SessionService."""

from datetime import datetime, timedelta, timezone

from sqlmodel import select

from app.models.session import AuthSession
from app.services.session_service import hash_token


class TestCreate:

    def test_stores_digest_not_token(self, session_service, db, make_user):
        user = make_user()

        token, stored = session_service.create(db, user)

        assert stored.session_id == hash_token(token)
        assert token not in {row.session_id for row in db.exec(select(AuthSession)).all()}

    def test_reaps_expired_sessions_of_user(self, session_service, db, make_user):
        user = make_user()
        past = datetime.now(timezone.utc) - timedelta(days=1)
        db.add(AuthSession(session_id="stale", user_id=user.user_id, expires_at=past))
        db.commit()

        session_service.create(db, user)

        assert db.get(AuthSession, "stale") is None


class TestResolve:

    def test_live_token_resolves_to_user_id(self, session_service, db, make_user):
        user = make_user()
        token, _ = session_service.create(db, user)

        identity = session_service.resolve(db, token)

        assert identity is not None
        assert identity.user_id == user.user_id

    def test_missing_token_is_anonymous(self, session_service, db):
        assert session_service.resolve(db, None) is None
        assert session_service.resolve(db, "") is None

    def test_unknown_token_is_anonymous(self, session_service, db):
        assert session_service.resolve(db, "not-a-real-token") is None

    def test_expired_token_is_anonymous(self, session_service, db, make_user):
        user = make_user()
        token = "expired-token"
        past = datetime.now(timezone.utc) - timedelta(minutes=1)
        db.add(AuthSession(session_id=hash_token(token), user_id=user.user_id, expires_at=past))
        db.commit()

        assert session_service.resolve(db, token) is None


class TestRevoke:

    def test_revoked_token_no_longer_resolves(self, session_service, db, make_user):
        token, _ = session_service.create(db, make_user())

        removed = session_service.revoke(db, token)

        assert removed == 1
        assert session_service.resolve(db, token) is None

    def test_revoking_unknown_token_removes_nothing(self, session_service, db):
        assert session_service.revoke(db, "nope") == 0
