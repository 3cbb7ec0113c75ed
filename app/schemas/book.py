"""
Book Pydantic Schemas

Response shapes for the catalog endpoints. These are projections, not the
persisted rows: each one exposes only the fields a client should see, with
the author flattened to its name.

JSON keys are PascalCase ("Title", "PublishDate") while the Python
attributes stay snake_case. The alias generator does the translation;
FastAPI serializes response models by alias.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class BookSummary(BaseModel):
    """
    Short form of a book, used by every list endpoint and by the
    lookup-by-id endpoint.

    Built from rows of app.services.book_queries.book_summary_query(),
    whose columns are labelled title/author/genre.
    """

    title: str = Field(
        ...,
        description="Book title",
        examples=["Dune"],
    )

    author: str = Field(
        ...,
        description="Name of the book's author",
        examples=["Frank Herbert"],
    )

    genre: str = Field(
        ...,
        description="Genre label",
        examples=["Science Fiction"],
    )

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_pascal,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Title": "Dune",
                "Author": "Frank Herbert",
                "Genre": "Science Fiction",
            }
        },
    )


class BookDetail(BaseModel):
    """Full form of a book, returned by the details endpoint."""

    title: str = Field(..., description="Book title")
    genre: str = Field(..., description="Genre label")
    publish_date: datetime = Field(..., description="Date of publication")
    price: Decimal = Field(..., description="Book price")
    description: str | None = Field(
        default=None,
        description="Book description or summary",
    )
    author: str = Field(..., description="Name of the book's author")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_pascal,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Title": "Dune",
                "Genre": "Science Fiction",
                "PublishDate": "1965-08-01T00:00:00",
                "Price": "9.99",
                "Description": "A desert planet, a noble family, and the spice.",
                "Author": "Frank Herbert",
            }
        },
    )
