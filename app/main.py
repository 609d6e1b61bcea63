"""Adapi application factory and entry point."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.router import api_router
from app.core.config import AppSettings, settings as default_settings
from app.core.logging_setup import configure_logging
from app.core.request_logging import RequestLogMiddleware
from app.database.db_setup import Database
from app.database.initialize_db import init_db
from app.exceptions.handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store at startup and release its pool at shutdown."""
    configure_logging(app.state.settings)
    database: Database = app.state.database
    database.check_connection()
    if app.state.settings.DB_CREATE_TABLES:
        init_db(database)
    logger.info("Adapi API started")

    yield

    logger.info("Adapi API shutting down")
    database.dispose()


def create_app(settings: AppSettings | None = None, database: Database | None = None) -> FastAPI:
    """Build the FastAPI application.

    ``database`` defaults to one built from ``settings``; tests pass their own.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description="CRUD API for learning resources, themes and skills.",
        lifespan=lifespan,
        docs_url=settings.DOCS_URL,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    app.add_middleware(RequestLogMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router)

    # Mounted last so API routes take precedence.
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


def run() -> None:
    uvicorn.run("app.main:create_app", factory=True, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
