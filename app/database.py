# app/database.py
from functools import lru_cache
from typing import Any, Iterator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings
from app.core.supabase_client import get_supabase

settings = get_settings()


def _database_url(url: str) -> str:
    """
    Append sslmode=require to Postgres URLs if it is not already present.

    Hosted Postgres (Supabase pooler, etc.) requires SSL when running in
    the cloud. SQLite URLs are returned untouched.
    """
    if not url.startswith("postgres"):
        return url
    if "sslmode=" in url:
        return url
    return url + ("&sslmode=require" if "?" in url else "?sslmode=require")


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite only enforces FOREIGN KEY constraints when asked to, per connection.
    """

    @event.listens_for(engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@lru_cache
def get_engine() -> Engine:
    """
    Build the SQLAlchemy engine once per process.

    - SQLite: allow use from FastAPI's threadpool workers.
    - Postgres: small pool with pre-ping, the hosted pooler limits clients.
    """
    url = _database_url(settings.DATABASE_URL)
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(
        url,
        echo=False,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=0,
    )


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup (SQL backend only; the
    Supabase backend expects the tables to exist already).
    """
    SQLModel.metadata.create_all(get_engine())


def get_session() -> Iterator[Session]:
    """
    FastAPI dependency that yields a SQLModel Session.
    """
    with Session(get_engine()) as session:
        yield session


def get_db() -> Iterator[Any]:
    """
    FastAPI dependency yielding the handle of the configured store backend.

    - STORE_BACKEND=sql      -> SQLModel Session (closed after the request)
    - STORE_BACKEND=supabase -> shared Supabase Client

    Repositories receive this handle as their first argument.
    """
    if settings.STORE_BACKEND == "supabase":
        yield get_supabase()
        return
    yield from get_session()
