"""
SQLAlchemy Models Package

Model Relationships:
- Author <-> Book: Many-to-Many through BookAuthor, which also stores the
  1-based author order of each link.

Importing every model here makes them available as
`from bookcatalog.models import Book, Author` and registers them with
Base.metadata for Alembic.
"""

# The order matters for SQLAlchemy to resolve relationships
from bookcatalog.models.author import Author
from bookcatalog.models.book import UNKNOWN_STATUS, Book, BookAuthor, PublicationStatus

__all__ = [
    "Author",
    "Book",
    "BookAuthor",
    "PublicationStatus",
    "UNKNOWN_STATUS",
]
