"""
Book Pydantic Schemas

Handles:
- the ordered author id list (`authorIds`)
- partial updates where an omitted field means "unchanged"
- rendering of unset price/status (0 and UNKNOWN)

`status` is accepted as a plain string and checked against
PublicationStatus by the service layer, so an unknown value is reported as
"invalid status: <value>" with a 400, like every other business rule.
"""

from decimal import Decimal

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookcatalog.models import UNKNOWN_STATUS, Book
from bookcatalog.schemas.author import CamelModel
from bookcatalog.services.author_order import author_ids_from_links


class BookCreate(CamelModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Kokoro",
        "authorIds": [1, 2],
        "price": "1200.00",
        "status": "PUBLISHED"
    }
    """

    title: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["Kokoro"],
    )

    # An empty list is accepted here and rejected by the service with a 400
    author_ids: list[int] = Field(
        default_factory=list,
        description="Author ids in billing order; duplicates are dropped",
        examples=[[1, 2]],
    )

    price: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Book price",
        examples=["1200.00"],
    )

    status: str | None = Field(
        default=None,
        description="Publication status: UNPUBLISHED or PUBLISHED",
        examples=["PUBLISHED"],
    )


class BookUpdate(CamelModel):
    """
    Schema for a partial book update.

    Every field is optional. Omitting `authorIds` leaves the author list
    untouched; sending an empty list is an error, not a way to clear it.
    An empty body is a valid no-op and returns the current book.
    """

    title: str | None = Field(
        default=None,
        max_length=500,
        description="Book title",
    )

    author_ids: list[int] | None = Field(
        default=None,
        description="Author ids in billing order (replaces existing)",
    )

    price: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Book price",
    )

    status: str | None = Field(
        default=None,
        description="Publication status: UNPUBLISHED or PUBLISHED",
    )


class BookResponse(CamelModel):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author_ids: list[int] = Field(
        ...,
        description="Complete author id list, in author order",
    )
    price: Decimal = Field(..., description="Book price, 0 when not set")
    status: str = Field(..., description="Publication status, UNKNOWN when not set")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Kokoro",
                "authorIds": [1, 2],
                "price": "1200.00",
                "status": "PUBLISHED",
            }
        },
    )

    @classmethod
    def from_book(cls, book: Book, author_ids: list[int] | None = None) -> "BookResponse":
        """
        Render a Book row.

        Args:
            book: The stored book
            author_ids: Ordered author ids when already known (e.g. just
                written, or grouped from a join); read from the book's
                links otherwise
        """
        if author_ids is None:
            author_ids = author_ids_from_links(book.author_links)
        return cls(
            id=book.id,
            title=book.title,
            author_ids=author_ids,
            price=book.price if book.price is not None else Decimal("0"),
            status=book.status.value if book.status is not None else UNKNOWN_STATUS,
        )
