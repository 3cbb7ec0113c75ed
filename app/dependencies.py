"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Dependencies used by the catalog:
- DbSession: one SQLAlchemy session per request, always closed
- PublishDay: the calendar day captured by the {pubdate:pubdate} path segment
"""

from datetime import date
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.utils.routing import parse_publish_date

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


def get_publish_day(pubdate: str) -> date:
    """
    Resolve the pubdate path parameter to a date.

    The parameter name matches the route's {pubdate:pubdate} segment, so
    FastAPI fills it from the path.
    """
    return parse_publish_date(pubdate)


PublishDay = Annotated[date, Depends(get_publish_day)]
