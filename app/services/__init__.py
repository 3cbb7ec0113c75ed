"""
Services Package

This package contains logic that is:
- Separate from HTTP handling (routers)
- Reusable across different parts of the application
- Easier to test in isolation

Current services:
- book_queries.py: Projections, predicates, and execution helpers for
  the catalog's read queries
"""
