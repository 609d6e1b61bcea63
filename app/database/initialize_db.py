import logging

from app.database.db_setup import Base, Database
from app.models import resource, resource_skill, skill, theme  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(database: Database) -> None:
    try:
        Base.metadata.create_all(bind=database.engine)
    except Exception:
        logger.exception("[-] Failed to create database tables")
        raise
