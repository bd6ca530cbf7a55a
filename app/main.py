# app/main.py
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.config import get_settings
from app.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from app.models import user as _user_models  # noqa: F401
from app.models import profile as _profile_models  # noqa: F401
from app.models import favorite as _favorite_models  # noqa: F401
from app.models import session as _session_models  # noqa: F401


# Routers
from app.routers.auth import router as auth_router
from app.routers.favorites import router as favorites_router
from app.routers.profiles import router as profiles_router
from app.routers.users import router as users_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - SQL backend: verify DB connectivity and create tables.
      - Supabase backend: tables are managed in the Supabase project.
    """
    if settings.STORE_BACKEND == "sql":
        logger.info("Startup: connecting to the database...")
        try:
            create_db_and_tables()
            logger.info("Startup: DB connection OK, tables verified.")
        except Exception as e:
            logger.error(f"Startup: DB connection FAILED: {e}")
            raise
    else:
        logger.info("Startup: using Supabase store at %s", settings.SUPABASE_URL)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- CORS configuration ---
# Cookies are sent cross-origin, so the frontend origin must be explicit.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(favorites_router, prefix=settings.API_PREFIX)
app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(profiles_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "movie-favorites-backend"}


def run() -> None:
    """Console entry point: serve on settings.PORT."""
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
