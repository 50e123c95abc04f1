"""
Author Order

A book's authors are an ordered list: position 1 is billed first. In the
database the list is stored as BookAuthor rows, one per author, with a
1-based `author_order`. These helpers convert between the two forms.

    >>> normalize_author_ids([3, 1, 3, 2])
    [3, 1, 2]
    >>> [(l.author_id, l.author_order) for l in build_author_links([3, 1])]
    [(3, 1), (1, 2)]
"""

from collections.abc import Iterable

from bookcatalog.models import BookAuthor


def normalize_author_ids(author_ids: Iterable[int]) -> list[int]:
    """Drop duplicate ids, keeping the first occurrence of each."""
    # dict preserves insertion order
    return list(dict.fromkeys(author_ids))


def build_author_links(author_ids: Iterable[int]) -> list[BookAuthor]:
    """
    Create one BookAuthor per id with author_order = position (from 1).

    The links have no book_id yet; appending them to `book.author_links`
    fills it in on flush.
    """
    return [
        BookAuthor(author_id=author_id, author_order=position)
        for position, author_id in enumerate(author_ids, start=1)
    ]


def author_ids_from_links(links: Iterable[BookAuthor]) -> list[int]:
    """Author ids sorted by their author_order."""
    return [link.author_id for link in sorted(links, key=lambda link: link.author_order)]


def group_author_ids(rows: Iterable[tuple[int, int, int]]) -> dict[int, list[int]]:
    """
    Group (book_id, author_id, author_order) rows into ordered id lists.

    Rows may arrive in any order; each book's ids come out sorted by
    author_order. Books keep the order of their first row.
    """
    grouped: dict[int, list[tuple[int, int]]] = {}
    for book_id, author_id, author_order in rows:
        grouped.setdefault(book_id, []).append((author_order, author_id))
    return {
        book_id: [author_id for _, author_id in sorted(pairs)]
        for book_id, pairs in grouped.items()
    }
