"""
Pydantic Schemas Package

Request/response models, kept separate from the SQLAlchemy models so the
API shape (camelCase JSON, rendered defaults) can differ from the tables.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxUpdate: Partial update; omitted fields mean "unchanged"
- XxxResponse: Fields returned in API responses
"""

from bookcatalog.schemas.author import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
)
from bookcatalog.schemas.book import (
    BookCreate,
    BookResponse,
    BookUpdate,
)
from bookcatalog.schemas.error import ErrorResponse

__all__ = [
    # Author schemas
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Errors
    "ErrorResponse",
]
