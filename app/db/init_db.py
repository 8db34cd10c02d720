"""Database initialization utilities."""
from sqlalchemy import inspect

from app.core.logging import get_logger
from app.db.base import Base, import_models
from app.db.session import engine

logger = get_logger(__name__)


def init_db(bind=None) -> None:
    """
    Create all tables that do not exist yet.

    Note: This is suitable for development/testing only.
    """
    bind = bind or engine
    try:
        import_models()

        existing_tables = inspect(bind).get_table_names()
        Base.metadata.create_all(bind=bind)
        logger.info(f"Database initialized ({len(existing_tables)} tables already present)")

    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(bind=None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    """
    bind = bind or engine
    Base.metadata.drop_all(bind=bind)
    logger.warning("All database tables dropped")
