"""Unit tests for the authorization gate."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException

from app.schemas.auth import SessionIdentity
from app.services.authorization import Action, can_perform, ensure_can_perform


@pytest.fixture
def identity():
    return SessionIdentity(
        user_id=7,
        session_id="abc",
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
    )


class TestCanPerform:

    def test_anonymous_is_denied_everything(self):
        assert not can_perform(None, Action.AUTHENTICATED)
        assert not can_perform(None, Action.REMOVE_FAVORITE, "Kids")

    def test_authenticated_may_remove_from_regular_profile(self, identity):
        assert can_perform(identity, Action.REMOVE_FAVORITE, "Kids")

    def test_guest_profile_may_not_remove(self, identity):
        assert not can_perform(identity, Action.REMOVE_FAVORITE, "Guest")

    def test_guest_name_only_matters_for_removal(self, identity):
        assert can_perform(identity, Action.AUTHENTICATED, "Guest")

    def test_custom_guest_name(self, identity):
        assert not can_perform(
            identity, Action.REMOVE_FAVORITE, "Visitor", guest_profile_name="Visitor"
        )


class TestEnsureCanPerform:

    def test_anonymous_raises_403(self):
        with pytest.raises(HTTPException) as exc_info:
            ensure_can_perform(None, Action.AUTHENTICATED)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "User not authenticated"

    def test_guest_raises_403(self, identity):
        with pytest.raises(HTTPException) as exc_info:
            ensure_can_perform(identity, Action.REMOVE_FAVORITE, "Guest")

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Guests cannot remove favorites."

    def test_anonymous_removal_gets_the_removal_message(self):
        with pytest.raises(HTTPException) as exc_info:
            ensure_can_perform(None, Action.REMOVE_FAVORITE)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Guests cannot remove favorites."

    def test_returns_identity_when_allowed(self, identity):
        assert ensure_can_perform(identity, Action.REMOVE_FAVORITE, "Main") is identity
