"""FastAPI application factory for the commerce admin attribute API."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from app.config import Settings, get_settings
from app.infrastructure.database.session import create_tables
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.v1.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_postgres_database(database_url: str) -> None:
    """Create the target PostgreSQL database when it is missing.

    Other backends are left alone; SQLite creates its file on first connect.
    Failure only logs a warning, the table step will surface a real error.
    """
    url = make_url(database_url)
    if not url.drivername.startswith("postgresql") or not url.database:
        return

    import asyncpg

    admin_dsn = url.set(drivername="postgresql", database="postgres").render_as_string(
        hide_password=False
    )
    try:
        conn = await asyncpg.connect(admin_dsn)
    except Exception as exc:
        logger.warning("Cannot reach PostgreSQL to check database '%s': %s", url.database, exc)
        return

    try:
        found = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", url.database)
        if found:
            logger.debug("Database '%s' present", url.database)
        else:
            # not allowed inside a transaction block
            await conn.execute(f'CREATE DATABASE "{url.database}"')
            logger.info("Created database '%s'", url.database)
    except Exception as exc:
        logger.warning("Could not create database '%s': %s", url.database, exc)
    finally:
        await conn.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    setup_logging(settings)
    await _ensure_postgres_database(settings.database_url)
    await create_tables()
    logger.info(
        "%s %s ready (env=%s, editor timeout=%.1fs)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.attribute_request_timeout,
    )
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API app; ``settings`` defaults to the cached environment settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "PUT"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8020, reload=True)
