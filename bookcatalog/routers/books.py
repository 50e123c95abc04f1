"""
Books Router

Endpoints for creating, updating and reading books.

PUT uses partial-update semantics: only the fields present in the body
change. `authorIds` replaces the whole author list when present.
"""

from fastapi import APIRouter, status

from bookcatalog.dependencies import DbSession
from bookcatalog.schemas import BookCreate, BookResponse, BookUpdate, ErrorResponse
from bookcatalog.services import books as book_service

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book with at least one author. Duplicate author ids are "
                "dropped; the remaining order is the author order.",
    responses={409: {"model": ErrorResponse, "description": "Constraint violation"}},
)
def create_book(
    book_data: BookCreate,
    db: DbSession,
) -> BookResponse:
    """
    Create a new book.

    Returns:
        Created book with its normalized author id list
    """
    book = book_service.create_book(db, book_data)
    return BookResponse.from_book(book)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(
    book_id: int,
    db: DbSession,
) -> BookResponse:
    """Get a single book by its ID."""
    book = book_service.get_book(db, book_id)
    return BookResponse.from_book(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Partially update a book. Omitted fields are unchanged; an empty "
                "authorIds list is rejected.",
    responses={409: {"model": ErrorResponse, "description": "Update conflicts"}},
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> BookResponse:
    """
    Update an existing book.

    Raises (as error responses):
        404 if the book does not exist
        400 for an empty/unknown author list or invalid status
    """
    book = book_service.update_book(db, book_id, book_data)
    return BookResponse.from_book(book)
