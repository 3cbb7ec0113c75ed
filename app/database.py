"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Books Catalog API.

The catalog is read-only: the books and authors rows are maintained by
other systems, and this service only queries them. We use SYNCHRONOUS
SQLAlchemy; FastAPI runs the plain `def` route handlers in its threadpool,
so a slow query holds up only the request that issued it.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all queries in that request
3. Close session when request ends, whether it succeeded or failed

This is implemented using FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size: Number of connections to keep open permanently
# - max_overflow: How many extra connections can be created during high load
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements (useful for debugging, disable in production)

engine_options: dict = {
    "pool_pre_ping": True,
    "echo": settings.debug,
}
if settings.is_sqlite:
    # SQLite connections may be used from FastAPI's worker threads
    engine_options["connect_args"] = {"check_same_thread": False}
else:
    engine_options["pool_size"] = settings.db_pool_size
    engine_options["max_overflow"] = settings.db_max_overflow

engine = create_engine(settings.database_url, **engine_options)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit (nothing is ever committed here)
# - autoflush=False: Don't auto-flush before queries
# - bind=engine: Connect sessions to our database engine

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class:

        class Book(Base):
            __tablename__ = "books"
            ...
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    This is a generator function (uses yield) that:
    1. Creates a new database session
    2. Yields it to the route handler
    3. Closes it when the request ends (in the finally block)

    The finally block ensures the connection goes back to the pool even
    if the query raised.

    Usage in Routes:
        from app.dependencies import DbSession

        @router.get("/books")
        def list_books(db: DbSession):
            return db.execute(select(Book)).scalars().all()

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
    Create the books and authors tables if they don't exist.

    Used by the seed script and by development setups with
    DB_CREATE_TABLES=true. Production databases already hold the schema.
    """
    # Models must be imported so they're registered on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

