"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import omi.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import omi_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from omi.infrastructure.persistence.sqlalchemy.engine import build_engine
from omi.infrastructure.persistence.sqlalchemy.models.base import Base
from omi_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owns_engine = engine is None
    engine = engine or build_engine(get_settings().database_url)
    logger.info("Ensuring all database tables exist...")

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        if owns_engine:
            await engine.dispose()
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Drop all database tables. Used by the CLI and by tests."""
    owns_engine = engine is None
    engine = engine or build_engine(get_settings().database_url)
    logger.warning("Dropping all database tables...")

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        if owns_engine:
            await engine.dispose()
    logger.info("Database tables dropped")
