"""
Book Service

Create, update and read books.

Every book has at least one author, kept in order. All checks (status,
price, author existence) run before the first write; the book row and its
author links are then written in one transaction.
"""

import logging

from sqlalchemy.orm import Session

from bookcatalog.database import conflicts_as
from bookcatalog.exceptions import NotFoundError
from bookcatalog.models import Book
from bookcatalog.schemas import BookCreate, BookUpdate
from bookcatalog.services.author_order import build_author_links, normalize_author_ids
from bookcatalog.services.validation import (
    parse_status,
    require_authors,
    require_authors_exist,
    require_not_blank,
    require_price,
)

logger = logging.getLogger(__name__)


def get_book(db: Session, book_id: int) -> Book:
    """Get a book by ID or raise NotFoundError."""
    book = db.get(Book, book_id)
    if book is None:
        raise NotFoundError("book not found")
    return book


def replace_author_links(db: Session, book: Book, author_ids: list[int]) -> None:
    """
    Replace all of a book's author links with `author_ids`, in that order.

    Existing links are deleted and flushed before the new ones are inserted,
    so an author kept at a different position never collides with its old
    row. Must run inside the caller's transaction.
    """
    book.author_links.clear()
    db.flush()
    book.author_links.extend(build_author_links(author_ids))
    db.flush()


def create_book(db: Session, data: BookCreate) -> Book:
    """
    Create a new book with its ordered author list.

    Duplicate author ids are dropped (first occurrence wins) and the
    remaining ids get author_order 1, 2, 3, ... in request order. Price and
    status are stored only when provided.

    Args:
        db: Database session
        data: Validated request body

    Returns:
        The stored book, links included

    Raises:
        BadRequestError: Blank title, no authors, unknown author id,
            invalid status or negative price
        ConflictError: A database constraint rejected the book or a link
    """
    require_not_blank(data.title, "title")
    require_authors(data.author_ids)
    author_ids = require_authors(normalize_author_ids(data.author_ids))
    status = parse_status(data.status)
    price = require_price(data.price)
    require_authors_exist(db, author_ids)

    book = Book(title=data.title, author_links=build_author_links(author_ids))
    if price is not None:
        book.price = price
    if status is not None:
        book.status = status

    with conflicts_as(db, "conflict performing DB operation"):
        db.add(book)
        db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.id} with authors {author_ids}")
    return book


def update_book(db: Session, book_id: int, data: BookUpdate) -> Book:
    """
    Apply a partial update to a book.

    - title/price/status: set when present, unchanged when omitted
    - author_ids: omitted keeps the current list; a non-empty list replaces
      it (deduplicated, renumbered from 1); an empty list is rejected

    An update with nothing in it is valid and returns the book as stored.

    Raises:
        NotFoundError: No book with this id
        BadRequestError: Empty author list, unknown author id, invalid
            status, blank title or negative price
        ConflictError: A constraint rejected the write, or the row
            disappeared before the UPDATE ran
    """
    book = get_book(db, book_id)

    if data.author_ids is not None:
        require_authors(data.author_ids)
    status = parse_status(data.status)
    if data.title is not None:
        require_not_blank(data.title, "title")
    require_price(data.price)

    author_ids = None
    if data.author_ids is not None:
        author_ids = normalize_author_ids(data.author_ids)
        require_authors_exist(db, author_ids)

    changes = data.model_dump(include={"title", "price", "status"}, exclude_none=True)
    if status is not None:
        changes["status"] = status

    if author_ids is None and not changes:
        logger.debug(f"No changes for book {book_id}")
        db.refresh(book)
        return book

    with conflicts_as(db, "failed to update book"):
        if author_ids is not None:
            replace_author_links(db, book, author_ids)
        for field, value in changes.items():
            setattr(book, field, value)
        db.commit()
    db.refresh(book)

    if author_ids is not None:
        logger.info(f"Updated book {book_id}: {sorted(changes)}, authors {author_ids}")
    else:
        logger.info(f"Updated book {book_id}: {sorted(changes)}")
    return book
