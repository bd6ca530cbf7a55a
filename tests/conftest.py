"""Pytest fixtures: in-memory SQLite store, TestClient, signed-in users."""

import os

# Settings are read at import time; pin them before importing the app.
os.environ["GOOGLE_CLIENT_ID"] = "test-client-id"
os.environ["GOOGLE_CLIENT_SECRET"] = "test-client-secret"
os.environ["GOOGLE_CALLBACK_URL"] = "http://testserver/auth/google/callback"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["STORE_BACKEND"] = "sql"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["FRONTEND_URL"] = "http://frontend.test"
os.environ["API_PREFIX"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from app.database import enable_sqlite_foreign_keys, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.profile import Profile  # noqa: E402
from app.repositories.registry import build_repositories  # noqa: E402
from app.services.session_service import SessionService  # noqa: E402


@pytest.fixture
def engine():
    """Fresh in-memory database per test, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def repos():
    return build_repositories("sql")


@pytest.fixture
def client(db):
    """TestClient whose requests share the test database session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db, repos):
    def _make(email="a@b.com", name="Alice"):
        user, _ = repos.users.upsert_by_email(db, email, name)
        return user

    return _make


@pytest.fixture
def make_profile(db, repos):
    def _make(user_id, profile_name="Main"):
        return repos.profiles.create(db, Profile(user_id=user_id, profile_name=profile_name))

    return _make


@pytest.fixture
def session_service(repos):
    return SessionService(repos.sessions, ttl_minutes=60)


@pytest.fixture
def login(db, session_service):
    """Issue a session for `user` and return Authorization headers."""

    def _login(user):
        token, _ = session_service.create(db, user)
        return {"Authorization": f"Bearer {token}"}

    return _login
