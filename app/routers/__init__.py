"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- books.py: /api/books/* endpoints
- authors.py: /api/authors/{author_id}/books

Each router is imported and registered in main.py.
"""

from app.routers.authors import router as authors_router
from app.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
