"""
Authors Router

Endpoints for creating, updating and reading authors, and for listing an
author's books. Business rules live in bookcatalog.services.authors; this
module only maps HTTP to those calls.
"""

from typing import List

from fastapi import APIRouter, status

from bookcatalog.dependencies import DbSession
from bookcatalog.schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookResponse,
    ErrorResponse,
)
from bookcatalog.services import authors as author_service

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Author not found"},
    },
)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create an author. The name must not be blank and the birth date "
                "must not be in the future.",
    responses={409: {"model": ErrorResponse, "description": "Author already exists"}},
)
def create_author(
    author_data: AuthorCreate,
    db: DbSession,
) -> AuthorResponse:
    """Create a new author."""
    author = author_service.create_author(db, author_data)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
def get_author(
    author_id: int,
    db: DbSession,
) -> AuthorResponse:
    """Get a single author by ID."""
    author = author_service.get_author(db, author_id)
    return AuthorResponse.model_validate(author)


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Partially update an author: only newName and/or newBirthDate "
                "are applied. At least one of them is required.",
    responses={409: {"model": ErrorResponse, "description": "Update conflicts"}},
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> AuthorResponse:
    """Update an existing author."""
    author = author_service.update_author(db, author_id, author_data)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="All books the author is linked to, ordered by book id. Each book "
                "lists all of its authors in author order.",
)
def get_author_books(
    author_id: int,
    db: DbSession,
) -> List[BookResponse]:
    """List the books of an author."""
    return author_service.get_books_by_author(db, author_id)
