"""
Domain Exceptions

Service functions raise these instead of HTTPException so they can be used
without a web request (scripts, tests). Each error kind carries the HTTP
status it maps to; the handler registered in bookcatalog.main turns it into
the `{status, error}` response body.

- BadRequestError: caller input invalid (blank name, future date, bad status,
  empty or unknown author ids, nothing to update)
- NotFoundError: referenced entity id does not exist
- ConflictError: uniqueness/constraint violation or a write that affected
  no rows
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for errors that are the caller's to fix (4xx)."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    status_code = status.HTTP_409_CONFLICT
