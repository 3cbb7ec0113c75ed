"""
Author Model

Represents an author in the catalog. Authors are referenced by books
through books.author_id; the API never writes them.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
# This prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from app.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many (an author has zero or more books)

    Example:
        author = Author(name="Frank Herbert")
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # author.books -> list of books; book.author points back here
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
