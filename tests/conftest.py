"""
pytest Fixtures for Books Catalog API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# so the application's own engine points at SQLite, not PostgreSQL
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "false"

from collections.abc import Generator
from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Author, Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained.
# StaticPool keeps the single connection alive for the whole session;
# without it the in-memory database would vanish between connections.

@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory database engine with the catalog tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def authors(db_session: Session) -> dict[str, Author]:
    """Create three authors, keyed by surname."""
    authors = {
        "herbert": Author(name="Frank Herbert"),
        "orwell": Author(name="George Orwell"),
        "asimov": Author(name="Isaac Asimov"),
    }
    db_session.add_all(authors.values())
    db_session.commit()
    for author in authors.values():
        db_session.refresh(author)
    return authors


@pytest.fixture
def catalog(db_session: Session, authors: dict[str, Author]) -> dict[str, Book]:
    """
    Create a small catalog, keyed by a short slug.

    Chosen so that:
    - "Scifi" appears with three different capitalizations
    - two books share 1965-08-01, one of them with a time of day
    - Herbert and Orwell have two books each, Asimov two
    """
    rows = [
        ("dune", "Dune", "Scifi", datetime(1965, 8, 1, 14, 30), "9.99", "herbert"),
        ("messiah", "Dune Messiah", "SciFi", datetime(1969, 10, 15), "10.99", "herbert"),
        ("nineteen", "1984", "Dystopian", datetime(1949, 6, 8), "12.99", "orwell"),
        ("farm", "Animal Farm", "Satire", datetime(1945, 8, 17), "9.99", "orwell"),
        ("foundation", "Foundation", "scifi", datetime(1951, 5, 1), "15.99", "asimov"),
        ("robot", "I, Robot", "Science Fiction", datetime(1965, 8, 1), "13.99", "asimov"),
    ]

    books = {}
    for slug, title, genre, published, price, author in rows:
        book = Book(
            title=title,
            genre=genre,
            publish_date=published,
            price=Decimal(price),
            description=f"Description of {title}",
            author=authors[author],
        )
        db_session.add(book)
        books[slug] = book

    db_session.commit()
    for book in books.values():
        db_session.refresh(book)
    return books
