"""Unit tests for IdentityService."""

import pytest
from sqlmodel import select

from app.core.oauth import OAuthError
from app.models.user import User
from app.schemas.auth import OAuthProfile
from app.services.identity_service import IdentityService


@pytest.fixture
def service(repos):
    return IdentityService(repos.users)


def _profile(email="new@example.com", name="New Person"):
    return OAuthProfile(external_id="google-123", email=email, display_name=name)


class TestResolve:

    def test_creates_user_on_first_sight(self, service, db):
        user = service.resolve(db, _profile())

        assert user.user_id is not None
        assert user.email == "new@example.com"
        assert user.name == "New Person"

    def test_second_resolution_returns_same_row(self, service, db):
        first = service.resolve(db, _profile())
        second = service.resolve(db, _profile())

        rows = db.exec(select(User).where(User.email == "new@example.com")).all()
        assert len(rows) == 1
        assert first.user_id == second.user_id

    def test_existing_user_is_not_updated(self, service, db, make_user):
        existing = make_user(email="a@b.com", name="Original")

        user = service.resolve(db, _profile(email="a@b.com", name="Changed At Google"))

        assert user.user_id == existing.user_id
        assert user.name == "Original"

    def test_name_defaults_to_email_local_part(self, service, db):
        user = service.resolve(db, _profile(email="moviebuff@example.com", name=None))

        assert user.name == "moviebuff"

    def test_profile_without_email_is_rejected(self, service, db):
        with pytest.raises(OAuthError):
            service.resolve(db, _profile(email=None))

        assert db.exec(select(User)).all() == []
