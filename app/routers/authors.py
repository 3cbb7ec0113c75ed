"""
Authors Router

Author-scoped views of the books catalog.
Follows the same patterns as the books router.
"""

from fastapi import APIRouter

from app.dependencies import DbSession
from app.schemas import BookSummary
from app.services.book_queries import author_id_is, book_summary_query, fetch_summaries

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
)


@router.get(
    "/{author_id:int}/books",
    response_model=list[BookSummary],
    summary="Get books by author",
    description="Get all books written by a specific author.",
)
def list_author_books(
    author_id: int,
    db: DbSession,
) -> list[BookSummary]:
    """
    Get all books by a specific author.

    An unknown author simply has no books: the result is an empty list,
    not a 404.
    """
    stmt = book_summary_query().where(author_id_is(author_id))
    return fetch_summaries(db, stmt)
