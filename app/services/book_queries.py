"""
Book Query Service

Builds the catalog's read queries out of two pieces:

- a projection: a select() of labelled columns over books JOIN authors,
  shaped like one of the response schemas
- a predicate: a boolean SQL expression evaluated per row by the database

Combining them gives a Select statement. Nothing runs until the statement
is handed to Session.execute(); executing the same statement again issues
the query again, so results always reflect the current rows.

Usage:
    stmt = book_summary_query().where(genre_matches("scifi"))
    summaries = fetch_summaries(db, stmt)
"""

from datetime import date, datetime, time, timedelta

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session

from app.models import Author, Book
from app.schemas import BookDetail, BookSummary


# =============================================================================
# Projections
# =============================================================================
def book_summary_query() -> Select:
    """
    Projection of every book into the BookSummary shape.

    Columns are labelled with the BookSummary field names.
    No ORDER BY: rows come back in whatever order the store returns them.
    """
    return select(
        Book.title.label("title"),
        Author.name.label("author"),
        Book.genre.label("genre"),
    ).join(Book.author)


def book_detail_query() -> Select:
    """Projection of every book into the BookDetail shape."""
    return select(
        Book.title.label("title"),
        Book.genre.label("genre"),
        Book.publish_date.label("publish_date"),
        Book.price.label("price"),
        Book.description.label("description"),
        Author.name.label("author"),
    ).join(Book.author)


# =============================================================================
# Predicates
# =============================================================================
def book_id_is(book_id: int) -> ColumnElement[bool]:
    """Match the book with this primary key."""
    return Book.id == book_id


def author_id_is(author_id: int) -> ColumnElement[bool]:
    """Match books whose author reference equals author_id."""
    return Book.author_id == author_id


def genre_matches(genre: str) -> ColumnElement[bool]:
    """
    Case-insensitive exact match on the genre label.

    Both sides are lowercased by the database's own lower(), so the
    stored value and the requested value are folded by the same rules
    ("SciFi" matches "Scifi" and "SCIFI").
    """
    return func.lower(Book.genre) == func.lower(genre)


def published_on(day: date) -> ColumnElement[bool]:
    """
    Match books published on the given calendar day, at any time of day.

    Expressed as a half-open range [day 00:00, next day 00:00) so it
    behaves the same on every backend and can use the publish_date index.
    """
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    return (Book.publish_date >= start) & (Book.publish_date < end)


# =============================================================================
# Execution
# =============================================================================
def fetch_summaries(db: Session, stmt: Select) -> list[BookSummary]:
    """Execute a summary query and validate every row."""
    return [BookSummary.model_validate(row) for row in db.execute(stmt)]


def fetch_summary(db: Session, stmt: Select) -> BookSummary | None:
    """Execute a summary query expected to match at most one row."""
    row = db.execute(stmt).one_or_none()
    return BookSummary.model_validate(row) if row is not None else None


def fetch_first_detail(db: Session, stmt: Select) -> BookDetail | None:
    """Execute a detail query and return its first row, if any."""
    row = db.execute(stmt.limit(1)).first()
    return BookDetail.model_validate(row) if row is not None else None
