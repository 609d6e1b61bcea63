from __future__ import annotations

import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import AppSettings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Connection pool and session factory for one database.

    Built once per application (or per test) and handed to the request
    dependencies through ``app.state.database``.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.engine = create_engine(url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "Database":
        engine_kwargs = {"pool_pre_ping": True}
        if settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update(
                {
                    "pool_size": settings.DB_POOL_SIZE,
                    "max_overflow": settings.DB_MAX_OVERFLOW,
                    "pool_timeout": settings.DB_POOL_TIMEOUT,
                    "pool_recycle": settings.DB_POOL_RECYCLE,
                }
            )
        return cls(settings.DATABASE_URL, **engine_kwargs)

    def session(self) -> Session:
        return self.session_factory()

    def check_connection(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Error connecting to the database")
            return False
        logger.info("Connected to the database (%s)", self.engine.url.render_as_string(hide_password=True))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


# Get db
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
