"""Database session management."""
import time
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def _engine_options() -> Dict[str, Any]:
    if settings.is_sqlite():
        return {
            "echo": settings.DB_ECHO,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_pre_ping": True,  # Check connection before using it
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_POOL_OVERFLOW,
        "pool_recycle": 3600,
        "echo": settings.DB_ECHO,
        "connect_args": settings.DB_CONNECT_ARGS,
    }


def enable_sqlite_savepoints(sqlite_engine: Engine) -> Engine:
    """
    Let SQLAlchemy emit BEGIN itself so SAVEPOINT works on pysqlite.

    The driver's own transaction handling otherwise commits around
    savepoints and breaks ``Session.begin_nested()``.
    """

    @event.listens_for(sqlite_engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return sqlite_engine


engine = create_engine(settings.get_database_url(), **_engine_options())
if settings.is_sqlite():
    enable_sqlite_savepoints(engine)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault('query_start_time', []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    total_time = time.time() - conn.info['query_start_time'].pop()

    if total_time > settings.SLOW_QUERY_THRESHOLD:
        logger.warning(
            f"Slow query detected ({total_time:.4f}s): {statement[:100]}...",
            extra={"execution_time": total_time},
        )


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/rooms")
        def list_rooms(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
