"""
Pydantic Schemas Package

This package contains Pydantic models for response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Decoupling: Database schema can evolve independently of API
3. Documentation: Schemas generate OpenAPI documentation

The catalog is read-only, so there are only response schemas:
- BookSummary: title, author name, genre
- BookDetail: every descriptive field plus the author name
"""

from app.schemas.book import BookDetail, BookSummary

__all__ = [
    "BookDetail",
    "BookSummary",
]
