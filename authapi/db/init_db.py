"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from authapi.db.session import engine
from authapi.models.base import Base
from authapi.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> bool:
    """
    Create all tables based on SQLAlchemy models.

    Returns False (after logging) when the database cannot be reached, so
    the caller can keep serving in a degraded state instead of crashing.
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Database initialization failed; continuing without storage")
        return False
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    return True


def check_db() -> bool:
    """Round-trip a trivial query to see whether the store is reachable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        return False
    return True
