"""
Tests for the development seed script.
"""

from sqlalchemy import func, select

from bookcatalog.models import Author, Book
from bookcatalog.schemas import BookResponse
from scripts.seed_data import AUTHORS, BOOKS, clear_data, create_authors, create_books


class TestSeedData:
    """The seed data goes through the services and keeps author order."""

    def test_seed_creates_everything(self, db_session):
        authors = create_authors(db_session)
        books = create_books(db_session, authors)

        assert len(authors) == len(AUTHORS)
        assert len(books) == len(BOOKS)

    def test_seed_keeps_billing_order(self, db_session):
        authors = create_authors(db_session)
        books = {book.title: book for book in create_books(db_session, authors)}

        pratchett = authors["Terry Pratchett"].id
        gaiman = authors["Neil Gaiman"].id
        assert BookResponse.from_book(books["Good Omens"]).author_ids == [pratchett, gaiman]
        assert BookResponse.from_book(books["Untitled Draft"]).author_ids == [gaiman, pratchett]

    def test_seed_book_without_price(self, db_session):
        authors = create_authors(db_session)
        books = {book.title: book for book in create_books(db_session, authors)}

        draft = BookResponse.from_book(books["Untitled Draft"])
        assert draft.price == 0
        assert draft.status == "UNPUBLISHED"

    def test_clear_data(self, db_session):
        create_books(db_session, create_authors(db_session))

        clear_data(db_session)

        assert db_session.scalar(select(func.count()).select_from(Author)) == 0
        assert db_session.scalar(select(func.count()).select_from(Book)) == 0
