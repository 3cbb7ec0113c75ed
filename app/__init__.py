"""
Books Catalog API Application Package

A read-only HTTP API over a catalog of books and authors.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory, per-request sessions
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models (Book, Author)
- schemas/: Pydantic response schemas (BookSummary, BookDetail)
- routers/: API route handlers
- services/: Query composition (projections and predicates)
- utils/: Routing helpers
"""

__version__ = "0.1.0"
