"""
Tests for the Author Order helpers
"""

from bookcatalog.models import BookAuthor
from bookcatalog.services.author_order import (
    author_ids_from_links,
    build_author_links,
    group_author_ids,
    normalize_author_ids,
)


class TestNormalizeAuthorIds:
    """Tests for normalize_author_ids()."""

    def test_first_occurrence_wins(self):
        assert normalize_author_ids([1, 2, 1]) == [1, 2]
        assert normalize_author_ids([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_order_is_kept(self):
        assert normalize_author_ids([9, 4, 7]) == [9, 4, 7]

    def test_empty(self):
        assert normalize_author_ids([]) == []


class TestBuildAuthorLinks:
    """Tests for build_author_links()."""

    def test_orders_start_at_one(self):
        links = build_author_links([7, 3, 5])

        assert [(link.author_id, link.author_order) for link in links] == [
            (7, 1),
            (3, 2),
            (5, 3),
        ]

    def test_links_have_no_book_yet(self):
        (link,) = build_author_links([7])
        assert link.book_id is None


class TestAuthorIdsFromLinks:
    """Tests for author_ids_from_links()."""

    def test_sorted_by_author_order(self):
        links = [
            BookAuthor(author_id=5, author_order=3),
            BookAuthor(author_id=7, author_order=1),
            BookAuthor(author_id=3, author_order=2),
        ]
        assert author_ids_from_links(links) == [7, 3, 5]

    def test_build_then_read_keeps_order(self):
        assert author_ids_from_links(build_author_links([4, 2, 8])) == [4, 2, 8]


class TestGroupAuthorIds:
    """Tests for group_author_ids()."""

    def test_groups_per_book_in_author_order(self):
        rows = [
            (2, 30, 2),
            (1, 10, 1),
            (2, 10, 1),
            (1, 20, 2),
            (2, 40, 3),
        ]

        assert group_author_ids(rows) == {1: [10, 20], 2: [10, 30, 40]}

    def test_no_rows(self):
        assert group_author_ids([]) == {}
