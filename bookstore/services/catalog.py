"""
Catalog Query Service

Read-only lookups over the Book Store:
- get_all: every book, keyed by id
- get_by_isbn: exact id lookup
- get_by_author / get_by_title: case-insensitive substring match
- get_reviews: the review mapping of one book

Lookups are linear scans in id order; the catalog is small and static.
"""

from bookstore.database import BookStore
from bookstore.exceptions import NotFound
from bookstore.models import Book, Review


def parse_isbn(isbn: int | str) -> int:
    """
    Turn a book identifier from a URL into a catalog key.

    Only the plain decimal spelling of a key matches it: "8" is book 8,
    while "08", "+8", " 8" and "1_0" are unknown identifiers.

    Raises:
        NotFound: If the identifier is not a canonical key (no such book)
    """
    if isinstance(isbn, int):
        return isbn
    if not (isbn.isascii() and isbn.isdigit()) or str(int(isbn)) != isbn:
        raise NotFound("Book not found with this ISBN.")
    return int(isbn)


def get_all(store: BookStore) -> dict[int, Book]:
    return {book.id: book for book in store.all()}


def get_by_isbn(store: BookStore, isbn: int | str) -> Book:
    book = store.get(parse_isbn(isbn))
    if book is None:
        raise NotFound("Book not found with this ISBN.")
    return book


def _matching(store: BookStore, field: str, term: str) -> list[Book]:
    needle = term.lower()
    return store.filter(lambda book: needle in getattr(book, field).lower())


def get_by_author(store: BookStore, author: str) -> list[Book]:
    """
    Books whose author contains the given text, ignoring case.

    Raises:
        NotFound: If no book matches
    """
    books = _matching(store, "author", author)
    if not books:
        raise NotFound("No books found by this author.")
    return books


def get_by_title(store: BookStore, title: str) -> list[Book]:
    """
    Books whose title contains the given text, ignoring case.

    Raises:
        NotFound: If no book matches
    """
    books = _matching(store, "title", title)
    if not books:
        raise NotFound("No books found with this title.")
    return books


def get_reviews(store: BookStore, isbn: int | str) -> dict[str, Review]:
    """Review mapping for a book; empty if nobody reviewed it yet."""
    return get_by_isbn(store, isbn).reviews
