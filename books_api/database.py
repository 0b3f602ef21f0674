"""Engine lifecycle, startup connection retries and per-request sessions."""

import time
from collections.abc import Generator
from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from books_api.config import Settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by the ORM models."""


# Set by initialize_database(), cleared by dispose_engine()
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def build_engine(database_url: str) -> Engine:
    """Create an engine with pool settings suited to the database dialect."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def connect_with_retry(engine: Engine, retries: int, delay: float) -> None:
    """
    Block until the database accepts connections.

    Raises the last OperationalError once every attempt has failed.
    """
    for attempt in range(1, retries + 1):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except OperationalError as e:
            logger.warning(
                "database_connect_failed",
                attempt=attempt,
                retries=retries,
                error=str(e.orig) if e.orig is not None else str(e),
            )
            if attempt == retries:
                raise
            time.sleep(delay)
        else:
            logger.info("database_connected", attempt=attempt)
            return


def initialize_database(settings: Settings) -> Engine:
    """Create the engine, wait for the database, create tables and build the session factory."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = build_engine(settings.database_url)
    connect_with_retry(_engine, settings.DB_CONNECT_RETRIES, settings.DB_CONNECT_RETRY_DELAY)

    # Import models so their tables are registered on Base.metadata
    from books_api import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=_engine)

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


def get_engine() -> Engine:
    """Return the engine created at startup."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Return the session factory created at startup."""
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# Router dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
