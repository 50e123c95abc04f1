"""
pytest Fixtures for Book Catalog Tests

Shared fixtures used across all test files.

For database tests, we use:
- a fresh SQLite in-memory engine per test (tables created, then dropped),
  so a rolled-back conflict in one test can't leak into another
- one session per test, shared by the test body and the API client, so
  rows created through fixtures are visible to requests and vice versa
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app
import os

os.environ["ENVIRONMENT"] = "development"
os.environ["REFERENCE_TIMEZONE"] = "Asia/Tokyo"

from collections.abc import Generator
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookcatalog.database import Base, get_db
from bookcatalog.main import app
from bookcatalog.models import Author, Book, PublicationStatus
from bookcatalog.services.author_order import build_author_links

API = "/api/v1"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="function")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole test;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The get_db dependency is overridden to hand out the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
def make_author(db: Session, name: str, birth_date: date) -> Author:
    author = Author(name=name, birth_date=birth_date)
    db.add(author)
    db.commit()
    db.refresh(author)
    return author


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    return make_author(db_session, "Natsume Soseki", date(1867, 2, 9))


@pytest.fixture
def second_author(db_session: Session) -> Author:
    return make_author(db_session, "Akutagawa Ryunosuke", date(1892, 3, 1))


@pytest.fixture
def third_author(db_session: Session) -> Author:
    return make_author(db_session, "Mori Ogai", date(1862, 2, 17))


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    second_author: Author,
) -> Book:
    """
    Create a book billed to sample_author first, then second_author.
    """
    book = Book(
        title="Kokoro",
        price=Decimal("1200.00"),
        status=PublicationStatus.UNPUBLISHED,
        author_links=build_author_links([sample_author.id, second_author.id]),
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
