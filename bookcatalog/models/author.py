"""
Author Model

Represents an author in the catalog.

An author is identified by a generated id, but the (name, birth_date) pair
is also unique: two authors with the same name and birth date are treated as
the same person and the second insert is rejected by the database.
"""

from datetime import date

from sqlalchemy import Date, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bookcatalog.database import Base


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Authors are referenced by BookAuthor rows but never own them; a book's
    links are managed from the Book side.

    Example:
        author = Author(name="Natsume Soseki", birth_date=date(1867, 2, 9))
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"
    __table_args__ = (
        UniqueConstraint("name", "birth_date", name="uq_authors_name_birth_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    # Date (not DateTime): only the calendar day matters
    birth_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Author's date of birth"
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}', birth_date={self.birth_date})"
