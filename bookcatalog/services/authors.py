"""
Author Service

Create, update and read authors, and list the books an author worked on.

Birth dates are checked against "today" in the reference timezone
(settings.reference_timezone), the same zone for create and update.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookcatalog.database import conflicts_as
from bookcatalog.exceptions import BadRequestError, NotFoundError
from bookcatalog.models import Author, Book, BookAuthor
from bookcatalog.schemas import AuthorCreate, AuthorUpdate, BookResponse
from bookcatalog.services.author_order import group_author_ids
from bookcatalog.services.validation import require_not_blank, require_not_future

logger = logging.getLogger(__name__)


def get_author(db: Session, author_id: int) -> Author:
    """Get an author by ID or raise NotFoundError."""
    author = db.get(Author, author_id)
    if author is None:
        raise NotFoundError("author not found")
    return author


def create_author(db: Session, data: AuthorCreate) -> Author:
    """
    Create a new author.

    Args:
        db: Database session
        data: Name and birth date

    Returns:
        The stored author, with its generated id

    Raises:
        BadRequestError: Blank name or birth date in the future
        ConflictError: An author with the same name and birth date exists
    """
    require_not_blank(data.name, "name")
    require_not_future(data.birth_date, "birthDate")

    author = Author(name=data.name, birth_date=data.birth_date)

    with conflicts_as(db, "author already exists"):
        db.add(author)
        db.commit()
    db.refresh(author)

    logger.info(f"Created author {author.id}")
    return author


def update_author(db: Session, author_id: int, data: AuthorUpdate) -> Author:
    """
    Apply a partial update to an author.

    Only the fields present in `data` change; the others keep their stored
    value. An update with no field at all is rejected before the author is
    looked up, so it fails the same way for any id.

    Raises:
        BadRequestError: Nothing to update, blank newName, future newBirthDate
        NotFoundError: No author with this id
        ConflictError: The result collides with another author, or the row
            disappeared before the UPDATE ran
    """
    changes = data.changes()
    if not changes:
        raise BadRequestError("nothing to update")
    if "name" in changes:
        require_not_blank(changes["name"], "newName")
    if "birth_date" in changes:
        require_not_future(changes["birth_date"], "newBirthDate")

    author = get_author(db, author_id)

    with conflicts_as(db, "failed to update author"):
        for field, value in changes.items():
            setattr(author, field, value)
        db.commit()
    db.refresh(author)

    logger.info(f"Updated author {author_id}: {sorted(changes)}")
    return author


def get_books_by_author(db: Session, author_id: int) -> list[BookResponse]:
    """
    List every book the author is linked to, ordered by book id.

    Each book carries its complete author list (not just `author_id`) in
    author order. Books and their links come from a single joined SELECT,
    so a book's author list is read from the same snapshot as the book
    itself, even if another transaction replaces the links meanwhile.

    Raises:
        NotFoundError: No author with this id
    """
    get_author(db, author_id)

    book_ids = select(BookAuthor.book_id).where(BookAuthor.author_id == author_id)

    rows = db.execute(
        select(Book, BookAuthor.author_id, BookAuthor.author_order)
        .join(Book.author_links)
        .where(Book.id.in_(book_ids))
        .order_by(Book.id, BookAuthor.author_order)
    ).all()

    books: dict[int, Book] = {}
    for book, _, _ in rows:
        books.setdefault(book.id, book)
    author_ids = group_author_ids(
        (book.id, link_author_id, author_order) for book, link_author_id, author_order in rows
    )

    return [BookResponse.from_book(book, author_ids[book_id]) for book_id, book in books.items()]
