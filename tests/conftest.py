"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import date
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from books_api import models
from books_api.config import Settings
from books_api.database import Base, get_db
from books_api.main import create_app
from tests.factories import SeededLibrary, make_author, make_book

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# Create test engine; StaticPool keeps one connection so every session sees the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

test_settings = Settings(
    _env_file=None,  # type: ignore[call-arg]
    DATABASE_URL=TEST_DATABASE_URL,
    ENVIRONMENT="test",
    DB_CONNECT_RETRIES=1,
    DB_CONNECT_RETRY_DELAY=0,
)

app = create_app(test_settings)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def author_a(db_session: Session) -> models.Author:
    return make_author(db_session, "Robert C. Martin", bio="Uncle Bob")


@pytest.fixture
def author_b(db_session: Session) -> models.Author:
    return make_author(db_session, "Eric Evans", minutes=1)


@pytest.fixture
def library(
    db_session: Session, author_a: models.Author, author_b: models.Author
) -> SeededLibrary:
    """
    Four books: three by author A, one by author B.

    Created in this order, one minute apart: Clean Code, Clean Architecture,
    Domain-Driven Design, Working Effectively with Legacy Code (undated).
    """
    return SeededLibrary(
        author_a=author_a,
        author_b=author_b,
        clean_code=make_book(
            db_session,
            author_a,
            "Clean Code",
            minutes=10,
            published_at=date(2008, 8, 1),
            description="A handbook of agile software craftsmanship",
        ),
        clean_architecture=make_book(
            db_session,
            author_a,
            "Clean Architecture",
            minutes=11,
            published_at=date(2017, 9, 10),
            description="A craftsman's guide to software structure and design",
        ),
        domain_driven_design=make_book(
            db_session,
            author_b,
            "Domain-Driven Design",
            minutes=12,
            published_at=date(2003, 8, 30),
            description="Tackling complexity in the heart of software",
        ),
        legacy_code=make_book(
            db_session,
            author_a,
            "Working Effectively with Legacy Code",
            minutes=13,
        ),
    )
