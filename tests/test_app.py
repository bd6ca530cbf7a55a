import pytest
from fastapi import FastAPI

from app.database import _database_url, get_engine
from app.main import app
from app.models.favorite import Favorite
from app.models.profile import Profile
from app.models.session import AuthSession
from app.models.user import User


def test_fastapi_app_instantiates():
    assert isinstance(app, FastAPI)


def test_health_check(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_postgres_url_requires_ssl():
    assert _database_url("postgresql://u:p@host/db") == "postgresql://u:p@host/db?sslmode=require"
    assert _database_url("postgresql://h/db?x=1") == "postgresql://h/db?x=1&sslmode=require"
    assert _database_url("postgresql://h/db?sslmode=disable") == "postgresql://h/db?sslmode=disable"
    assert _database_url("sqlite://") == "sqlite://"


@pytest.mark.parametrize(
    "column",
    [
        User.__table__.c.created_at,
        Profile.__table__.c.created_at,
        Favorite.__table__.c.created_at,
        AuthSession.__table__.c.created_at,
        AuthSession.__table__.c.expires_at,
    ],
)
def test_timestamps_are_timezone_aware(column):
    assert column.type.timezone is True


def test_sqlite_engine_enforces_foreign_keys():
    with get_engine().connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
