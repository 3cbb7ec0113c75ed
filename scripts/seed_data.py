#!/usr/bin/env python3
"""
Database Seed Script

Populates a development database with sample authors and books. The API
itself never writes; this script stands in for the systems that maintain
the catalog in production.

USAGE:
    # From the project root, with the package installed
    python scripts/seed_data.py

    # Against a throwaway SQLite file
    DATABASE_URL=sqlite:///./books.db python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Creates the tables if they don't exist
3. Clears existing data (optional)
4. Creates sample authors and their books
"""

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models import Author, Book


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors."""
    print("Creating authors...")
    names = [
        "Frank Herbert",
        "George Orwell",
        "Jane Austen",
        "Isaac Asimov",
        "Agatha Christie",
        "J.R.R. Tolkien",
    ]

    authors = {name: Author(name=name) for name in names}
    db.add_all(authors.values())
    db.commit()

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    """Create sample books, each attached to one author."""
    print("Creating books...")

    books_data = [
        {
            "title": "Dune",
            "genre": "Science Fiction",
            "publish_date": datetime(1965, 8, 1),
            "price": Decimal("9.99"),
            "description": "A desert planet, a noble family, and the spice that binds an empire.",
            "author": "Frank Herbert",
        },
        {
            "title": "1984",
            "genre": "Dystopian",
            "publish_date": datetime(1949, 6, 8),
            "price": Decimal("12.99"),
            "description": "A dystopian novel set in a totalitarian society under constant surveillance.",
            "author": "George Orwell",
        },
        {
            "title": "Animal Farm",
            "genre": "Satire",
            "publish_date": datetime(1945, 8, 17),
            "price": Decimal("9.99"),
            "description": "An allegorical novella reflecting events leading up to the Russian Revolution.",
            "author": "George Orwell",
        },
        {
            "title": "Pride and Prejudice",
            "genre": "Romance",
            "publish_date": datetime(1813, 1, 28),
            "price": Decimal("8.99"),
            "description": "A romantic novel following the emotional development of Elizabeth Bennet.",
            "author": "Jane Austen",
        },
        {
            "title": "Foundation",
            "genre": "Science Fiction",
            "publish_date": datetime(1951, 5, 1),
            "price": Decimal("15.99"),
            "description": "The first novel in the Foundation series about the fall of the Galactic Empire.",
            "author": "Isaac Asimov",
        },
        {
            "title": "I, Robot",
            "genre": "Science Fiction",
            "publish_date": datetime(1950, 12, 2),
            "price": Decimal("13.99"),
            "description": "A collection of nine science fiction short stories about robots.",
            "author": "Isaac Asimov",
        },
        {
            "title": "Murder on the Orient Express",
            "genre": "Mystery",
            "publish_date": datetime(1934, 1, 1),
            "price": Decimal("14.99"),
            "description": "Hercule Poirot investigates a murder on a train stuck in a snowdrift.",
            "author": "Agatha Christie",
        },
        {
            "title": "The Hobbit",
            "genre": "Fantasy",
            "publish_date": datetime(1937, 9, 21),
            "price": Decimal("14.99"),
            "description": "Bilbo Baggins embarks on a quest to reclaim the Lonely Mountain.",
            "author": "J.R.R. Tolkien",
        },
    ]

    books = []
    for data in books_data:
        author_name = data.pop("author")
        book = Book(**data, author=authors[author_name])
        db.add(book)
        books.append(book)

    db.commit()

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:8001/api/books")
        print(f"API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
