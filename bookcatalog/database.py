"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the catalog.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all database operations in that request
3. Service functions commit on success, rollback on failure
4. Close session when request ends

Each write operation therefore runs as one transaction: a book row and its
author links are either both committed or both rolled back.
"""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from bookcatalog.config import get_settings
from bookcatalog.exceptions import ConflictError

settings = get_settings()
logger = logging.getLogger(__name__)


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool sizing
# - pool_pre_ping: test connection health before use
# - echo: log SQL statements in debug mode

engine = create_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
    echo=settings.debug,
)


# =============================================================================
# Session Factory
# =============================================================================
# autoflush=False keeps the order of INSERT/DELETE statements explicit;
# services call flush() where ordering matters (author link replacement).

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a new session, yields it to the route handler and closes it
    when the request ends, even if the handler raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for local development and tests. Use Alembic migrations for
    real deployments.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and testing only.
    """
    Base.metadata.drop_all(bind=engine)


@contextmanager
def conflicts_as(db: Session, message: str) -> Iterator[None]:
    """
    Roll back and raise ConflictError when the wrapped writes collide.

    Two storage failures are the caller's to resolve rather than ours:
    - IntegrityError: a unique/check/foreign key constraint rejected a row
    - StaleDataError: an UPDATE matched no rows (the row vanished after we
      read it)

    Usage:
        with conflicts_as(db, "author already exists"):
            db.add(author)
            db.commit()
    """
    try:
        yield
    except (IntegrityError, StaleDataError) as exc:
        db.rollback()
        logger.warning(f"{message}: {exc.__class__.__name__}: {exc}")
        raise ConflictError(message) from exc
