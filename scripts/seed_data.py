#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root, with the package installed
    python scripts/seed_data.py

Data goes through the same service functions as the API, so every seeded
book passes the usual checks and gets its author order assigned the same
way.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookcatalog.database import SessionLocal, create_tables
from bookcatalog.models import Author, Book, BookAuthor
from bookcatalog.schemas import AuthorCreate, BookCreate
from bookcatalog.services.authors import create_author
from bookcatalog.services.books import create_book


AUTHORS = [
    ("Natsume Soseki", date(1867, 2, 9)),
    ("Akutagawa Ryunosuke", date(1892, 3, 1)),
    ("Terry Pratchett", date(1948, 4, 28)),
    ("Neil Gaiman", date(1960, 11, 10)),
]

# Author names in billing order
BOOKS = [
    {"title": "Kokoro", "authors": ["Natsume Soseki"],
     "price": Decimal("680.00"), "status": "PUBLISHED"},
    {"title": "Rashomon", "authors": ["Akutagawa Ryunosuke"],
     "price": Decimal("520.00"), "status": "PUBLISHED"},
    {"title": "Good Omens", "authors": ["Terry Pratchett", "Neil Gaiman"],
     "price": Decimal("1200.00"), "status": "PUBLISHED"},
    {"title": "Untitled Draft", "authors": ["Neil Gaiman", "Terry Pratchett"],
     "status": "UNPUBLISHED"},
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(BookAuthor))
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors, keyed by name."""
    print("Creating authors...")
    authors = {}
    for name, birth_date in AUTHORS:
        authors[name] = create_author(db, AuthorCreate(name=name, birth_date=birth_date))
    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    """Create sample books linked to the given authors."""
    print("Creating books...")
    books = []
    for data in BOOKS:
        payload = dict(data)
        author_names = payload.pop("authors")
        payload["author_ids"] = [authors[name].id for name in author_names]
        books.append(create_book(db, BookCreate(**payload)))
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")
        print("\nAPI documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
