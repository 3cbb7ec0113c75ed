"""
SQLAlchemy Models Package

This package contains the database models for the Books Catalog API.

Model Relationships:
- Author <-> Book: One-to-Many (an author writes many books,
                   each book has exactly one author)

Import all models here to:
1. Make them available as: from app.models import Book, Author
2. Register them on Base.metadata before create_tables() runs
"""

# The order matters for SQLAlchemy to resolve relationships
from app.models.author import Author
from app.models.book import Book

__all__ = [
    "Author",
    "Book",
]
