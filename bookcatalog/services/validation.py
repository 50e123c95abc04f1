"""
Validation Rules

Input checks shared by the author and book services. Each rule either
returns (possibly a normalized value) or raises BadRequestError; none of
them writes anything, so every rule can run before a transaction starts
changing rows.
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookcatalog.config import get_settings
from bookcatalog.exceptions import BadRequestError
from bookcatalog.models import Author, PublicationStatus


def require_not_blank(value: str, field: str) -> str:
    """Reject empty and whitespace-only strings."""
    if not value.strip():
        raise BadRequestError(f"{field} must not be blank")
    return value


def reference_today(tz_name: str | None = None) -> date:
    """
    Today's calendar date in the reference timezone.

    Args:
        tz_name: IANA zone name; defaults to settings.reference_timezone
    """
    zone = ZoneInfo(tz_name or get_settings().reference_timezone)
    return datetime.now(zone).date()


def require_not_future(value: date, field: str, today: date | None = None) -> date:
    """
    Reject dates strictly after today.

    Today itself is allowed.
    """
    if today is None:
        today = reference_today()
    if value > today:
        raise BadRequestError(f"{field} must not be in the future")
    return value


def parse_status(value: str | None) -> PublicationStatus | None:
    """
    Convert a status name to PublicationStatus.

    None passes through (status not provided). Names are case-sensitive.
    """
    if value is None:
        return None
    try:
        return PublicationStatus[value]
    except KeyError:
        raise BadRequestError(f"invalid status: {value}") from None


def require_price(value: Decimal | None) -> Decimal | None:
    """Reject negative prices; None means "not provided"."""
    if value is not None and value < 0:
        raise BadRequestError("price must not be negative")
    return value


def require_authors(author_ids: Sequence[int]) -> Sequence[int]:
    """A book needs at least one author."""
    if not author_ids:
        raise BadRequestError("book must have at least one author")
    return author_ids


def require_authors_exist(db: Session, author_ids: Sequence[int]) -> None:
    """
    Check that every id refers to an existing author.

    The whole set is checked with one COUNT query; the error does not say
    which id was missing. `author_ids` must already be deduplicated,
    otherwise the count can't match.
    """
    stmt = select(func.count(Author.id)).where(Author.id.in_(author_ids))
    found = db.execute(stmt).scalar() or 0
    if found != len(author_ids):
        raise BadRequestError("one or more authors not found")
