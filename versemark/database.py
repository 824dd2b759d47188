"""Database configuration and session management."""

from collections.abc import Generator
from contextlib import contextmanager

import structlog
from sqlalchemy import create_engine, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from versemark.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def is_sqlite_memory_url(database_url: str) -> bool:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if is_sqlite_memory_url(settings.DATABASE_URL):
        # One connection holds the whole in-memory database
        _engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif settings.DATABASE_URL.startswith("sqlite"):
        # A connection per session, so uncommitted writes stay private
        _engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
    else:
        _engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    logger.info("database_initialized", dialect=_engine.dialect.name)


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings or get_settings())

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def create_schema() -> None:
    """Create all tables on the configured engine (development and tests)."""
    from versemark import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=get_engine())


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


@contextmanager
def session_scope(settings: Settings | None = None) -> Generator[Session, None, None]:
    """Provide a session that is closed on exit; repositories commit their own writes."""
    db = get_session_factory(settings)()
    try:
        yield db
    finally:
        db.close()
