"""
Routing Helpers

Custom Starlette path convertor for publication dates.

The date routes accept two spellings of the same day:

    /api/books/date/2000-12-16
    /api/books/date/2000/12/16

The convertor's regex restricts what the route matches at all, so
anything else (a datetime, "Thu, 01 May 2008", letters) never reaches the
handler and gets the router's ordinary 404. Strings with the right shape
but no such calendar day (2001-02-30) are turned into a 404 by
parse_publish_date().

Convertors must be registered before any route using them is declared;
app.routers.books calls register_publish_date_convertor() at import time.
"""

from datetime import date, datetime

from fastapi import HTTPException, status
from starlette.convertors import Convertor, register_url_convertor

PUBLISH_DATE_CONVERTOR = "pubdate"

PUBLISH_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


class PublishDateConvertor(Convertor[str]):
    """Matches yyyy-mm-dd or yyyy/mm/dd and normalizes to yyyy-mm-dd."""

    regex = r"\d{4}-\d{2}-\d{2}|\d{4}/\d{2}/\d{2}"

    def convert(self, value: str) -> str:
        return value.replace("/", "-")

    def to_string(self, value: str | date) -> str:
        if isinstance(value, date):
            return value.isoformat()
        return str(value)


def register_publish_date_convertor() -> None:
    """Make {name:pubdate} available in route paths."""
    register_url_convertor(PUBLISH_DATE_CONVERTOR, PublishDateConvertor())


def parse_publish_date(value: str) -> date:
    """
    Parse a date captured by the pubdate convertor.

    Raises:
        HTTPException: 404 if the text isn't a real calendar date
    """
    for fmt in PUBLISH_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Not Found",
    )
