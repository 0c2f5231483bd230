"""Database connection and session management."""

from typing import Optional

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from investsim.config.settings import get_settings

Base = declarative_base()

# Module-level database state (can be reconfigured at runtime)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None

# Seconds a SQLite connection waits for another writer's lock
SQLITE_BUSY_TIMEOUT = 30


def _begin_immediate_on_sqlite(engine: Engine) -> None:
    """
    Make every SQLite transaction start with BEGIN IMMEDIATE.

    SQLite has no row locks and pysqlite only emits BEGIN before the first
    write, so two units of work could otherwise both read the same account
    balance. Taking the database write lock at the start of the transaction
    gives the same guarantee as SELECT ... FOR UPDATE on other backends.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(database_url: str, **engine_kwargs) -> Engine:
    """Create an engine for the ledger store; SQLite engines serialize units of work."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, **engine_kwargs)

    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT},
        echo=False,
        **engine_kwargs,
    )
    _begin_immediate_on_sqlite(engine)
    return engine


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        _engine = create_db_engine(get_settings().get_database_url())
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=get_engine(),
        )
    return _SessionLocal


def init_db() -> None:
    """Initialize database tables."""
    from investsim.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def reset_database() -> None:
    """Reset database state (for reconfiguration)."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _SessionLocal = None
