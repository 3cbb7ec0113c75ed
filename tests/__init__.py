"""
Test Suite for Books Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample catalog)
- test_books.py: Tests for /api/books endpoints
- test_authors.py: Tests for /api/authors/{author_id}/books
- test_book_queries.py: Tests for query composition without HTTP
- test_routing.py: Tests for the publication date path convertor
- test_app.py: Health check, root, error handling, media type

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=app --cov-report=html

    # Run specific file
    pytest tests/test_books.py
"""
