"""
Book Model

The central model of the catalog.

This file also contains the BookAuthor association model.

WHY an Association Model (not a plain Table)?
=============================================
The link between a book and its authors carries data of its own: the
author order. The first author of a book is the one billed first, so the
link table stores a 1-based `author_order` next to the two foreign keys.
A plain `Table` can't expose that column through the ORM, so the link is a
full mapped class.

A book owns its links: they are deleted with the book and are replaced as a
whole whenever the book's author list changes.
"""

import enum
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookcatalog.database import Base


class PublicationStatus(str, enum.Enum):
    """
    Publication state of a book.

    A book with no status stored is rendered as UNKNOWN_STATUS; that label is
    not a member, so clients can't set it explicitly.
    """

    UNPUBLISHED = "UNPUBLISHED"
    PUBLISHED = "PUBLISHED"


UNKNOWN_STATUS = "UNKNOWN"


# =============================================================================
# Association Model
# =============================================================================
class BookAuthor(Base):
    """
    Link between a book and one of its authors.

    Table: book_authors

    Constraints:
    - (book_id, author_id) is the primary key: an author appears once per book
    - (book_id, author_order) is unique: one author per position
    - author_order starts at 1
    """

    __tablename__ = "book_authors"
    __table_args__ = (
        UniqueConstraint(
            "book_id",
            "author_order",
            name="uq_book_authors_book_id_author_order",
        ),
        CheckConstraint("author_order >= 1", name="ck_book_authors_author_order"),
        {"comment": "Ordered association between books and their authors"},
    )

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id"),
        primary_key=True,
        index=True,
    )

    author_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="1-based position of the author within the book"
    )

    book: Mapped["Book"] = relationship("Book", back_populates="author_links")

    def __repr__(self) -> str:
        return (
            f"BookAuthor(book_id={self.book_id}, author_id={self.author_id}, "
            f"author_order={self.author_order})"
        )


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - price: Price with 2 decimal precision, NULL when not set
    - status: PublicationStatus, NULL when not set

    Relationships:
    - author_links: BookAuthor rows, ordered by author_order
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    # Numeric(10, 2): Decimal avoids float rounding on money
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Book price"
    )

    # native_enum=False stores the member name in a VARCHAR with a CHECK
    # constraint, which behaves the same on PostgreSQL and SQLite
    status: Mapped[PublicationStatus | None] = mapped_column(
        Enum(
            PublicationStatus,
            name="publication_status",
            native_enum=False,
            create_constraint=True,
            length=32,
        ),
        nullable=True,
        comment="Publication status"
    )

    author_links: Mapped[list[BookAuthor]] = relationship(
        BookAuthor,
        back_populates="book",
        order_by=BookAuthor.author_order,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
