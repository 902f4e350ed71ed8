"""
Review Management Service

Authenticated customers add, replace and delete their own review of a book.

Business Rules:
- One review per user per book; writing again replaces the earlier review
- Concurrent writes by the same user are last-write-wins
- Users can only delete their own review
"""

import logging

from bookstore.database import BookStore
from bookstore.exceptions import InvalidInput, NotFound
from bookstore.models import Review
from bookstore.services.catalog import parse_isbn

logger = logging.getLogger(__name__)


def upsert_review(store: BookStore, isbn: int | str, username: str, text: str | None) -> Review:
    """
    Add or replace the user's review of a book.

    Returns:
        The stored review (text and timestamp)

    Raises:
        InvalidInput: If the review text is missing or empty
        NotFound: If the book does not exist
    """
    if not text:
        raise InvalidInput("Review text is required to add or modify a review.")

    book_id = parse_isbn(isbn)
    review = store.set_review(book_id, username, Review(text=text))
    if review is None:
        raise NotFound("Book not found.")

    logger.info(f"Review for book {book_id} written by {username}")
    return review


def delete_review(store: BookStore, isbn: int | str, username: str) -> None:
    """
    Delete the user's review of a book.

    Raises:
        NotFound: If the book does not exist or the user has no review on it
    """
    book_id = parse_isbn(isbn)
    removed = store.remove_review(book_id, username)

    if removed is None:
        raise NotFound("Book not found.")
    if not removed:
        raise NotFound("No review found from this user for this book.")

    logger.info(f"Review for book {book_id} deleted by {username}")
