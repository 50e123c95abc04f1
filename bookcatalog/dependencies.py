"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

Annotated type aliases keep route signatures short:

    def get_author(author_id: int, db: DbSession): ...

instead of `db: Session = Depends(get_db)` in every handler. Tests replace
get_db through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookcatalog.database import get_db

DbSession = Annotated[Session, Depends(get_db)]
