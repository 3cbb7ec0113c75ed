"""
Book Model

The central model of the catalog. Each book belongs to exactly one author
via the author_id foreign key.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.author import Author


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title
    - genre: Free-text genre label ("Science Fiction", "Romance", ...)
    - publish_date: Publication timestamp; lookups only use the date part
    - price: Book price with 2 decimal precision
    - description: Book summary
    - author_id: Foreign key to authors.id (required)

    Relationships:
    - author: Many-to-One

    Example:
        book = Book(
            title="Dune",
            genre="Science Fiction",
            publish_date=datetime(1965, 8, 1),
            price=Decimal("9.99"),
            description="A desert planet...",
            author=herbert,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    genre: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Genre label, matched case-insensitively"
    )

    # DateTime (not Date): rows may carry a time-of-day, which the
    # publish date lookup ignores
    publish_date: Mapped[datetime] = mapped_column(
        DateTime,
        index=True,
        nullable=False,
        comment="Date of publication"
    )

    # Numeric(10, 2) = up to 10 digits, 2 after decimal point
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Book price"
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Book description or summary"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id"),
        index=True,
        nullable=False,
        comment="The book's author"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', genre='{self.genre}')"
