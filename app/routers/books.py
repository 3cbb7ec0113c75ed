"""
Books Router

Read-only endpoints over the books catalog.

Each handler composes a predicate with one of the projections from
app.services.book_queries and executes it through the request's session.

Route Order Matters
===================
/books/{book_id:int} and /books/{genre} overlap: "42" fits both. The int
routes are declared first, and the int convertor only matches digits, so
numeric segments are id lookups and everything else is a genre.
That includes negative numbers: /books/-1 is a lookup of the genre "-1"
and answers 200 with an empty list, not a 404 for a missing book.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies import DbSession, PublishDay
from app.models import Book
from app.schemas import BookDetail, BookSummary
from app.services.book_queries import (
    author_id_is,
    book_detail_query,
    book_id_is,
    book_summary_query,
    fetch_first_detail,
    fetch_summaries,
    fetch_summary,
    genre_matches,
    published_on,
)
from app.utils.routing import register_publish_date_convertor

logger = logging.getLogger(__name__)

# {pubdate:pubdate} below needs the convertor registered first
register_publish_date_convertor()

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=list[BookSummary],
    summary="List all books",
    description="Get every book in the catalog as a summary.",
)
def list_books(db: DbSession) -> list[BookSummary]:
    """List all books."""
    return fetch_summaries(db, book_summary_query())


@router.get(
    "/date/{pubdate:pubdate}",
    response_model=list[BookSummary],
    summary="Get books by publication date",
    description=(
        "Get books published on a given day. The date may be written as "
        "yyyy-mm-dd or yyyy/mm/dd; the time of day is ignored."
    ),
)
def list_books_by_publish_date(
    day: PublishDay,
    db: DbSession,
) -> list[BookSummary]:
    """Get books published on the given day."""
    stmt = book_summary_query().where(published_on(day))
    return fetch_summaries(db, stmt)


@router.get(
    "/{book_id:int}",
    response_model=BookSummary,
    summary="Get a book by ID",
    description="Retrieve the summary of a specific book.",
)
def get_book(
    book_id: int,
    db: DbSession,
) -> BookSummary:
    """
    Get a single book by ID.

    Raises:
        HTTPException: 404 if no book has this ID
    """
    book = fetch_summary(db, book_summary_query().where(book_id_is(book_id)))

    if book is None:
        logger.debug(f"Book {book_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return book


@router.get(
    "/{book_id:int}/details",
    response_model=BookDetail,
    summary="Get book details",
    description=(
        "Retrieve the full details of a book. The id is matched against "
        "the book's author reference, not the book's own id; when the "
        "author has several books the lowest book id is returned."
    ),
)
def get_book_detail(
    book_id: int,
    db: DbSession,
) -> BookDetail:
    """
    Get book details.

    NOTE: the id is compared with Book.author_id, not Book.id.

    Raises:
        HTTPException: 404 if no book references this author id
    """
    stmt = (
        book_detail_query()
        .where(author_id_is(book_id))
        .order_by(Book.id)
    )
    book = fetch_first_detail(db, stmt)

    if book is None:
        logger.debug(f"No book details for id {book_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book details for id {book_id} not found",
        )
    return book


@router.get(
    "/{genre}",
    response_model=list[BookSummary],
    summary="Get books by genre",
    description="Get all books of a genre. Matching is case-insensitive.",
)
def list_books_by_genre(
    genre: str,
    db: DbSession,
) -> list[BookSummary]:
    """Get books matching the genre, ignoring case."""
    return fetch_summaries(db, book_summary_query().where(genre_matches(genre)))
