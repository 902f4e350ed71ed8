"""
In-Memory Data Store Module

This module holds the catalog and the registered users for the life of the
process. Nothing is persisted: restarting the server restores the seed
catalog and forgets every user and review.

Store Ownership Pattern
=======================
Each application instance owns one BookStore and one UserDirectory, created
in create_app() and kept on app.state. Route handlers receive them through
FastAPI's dependency injection (get_book_store / get_user_directory), so tests
can build a fresh app or override the dependencies.

Locking
=======
Synchronous route handlers run in FastAPI's thread pool, so two requests can
touch a store at the same time. Every read and every read-modify-write
happens under the store's lock. Readers get copies, never the live records.
"""

import logging
import threading
from collections.abc import Callable, Iterable

from fastapi import Request

from bookstore.models import Book, Review, User

logger = logging.getLogger(__name__)


# =============================================================================
# Seed Data
# =============================================================================
SEED_BOOKS: list[dict] = [
    {"id": 1, "title": "Things Fall Apart", "author": "Chinua Achebe"},
    {"id": 2, "title": "Fairy tales", "author": "Hans Christian Andersen"},
    {"id": 3, "title": "The Divine Comedy", "author": "Dante Alighieri"},
    {"id": 4, "title": "The Epic Of Gilgamesh", "author": "Unknown"},
    {"id": 5, "title": "The Book Of Job", "author": "Unknown"},
    {"id": 6, "title": "One Thousand and One Nights", "author": "Unknown"},
    {"id": 7, "title": "Njál's Saga", "author": "Unknown"},
    {"id": 8, "title": "Pride and Prejudice", "author": "Jane Austen"},
    {"id": 9, "title": "Le Père Goriot", "author": "Honoré de Balzac"},
    {
        "id": 10,
        "title": "Molloy, Malone Dies, The Unnamable, the trilogy",
        "author": "Samuel Beckett",
    },
]


def _copy_book(book: Book) -> Book:
    # Review is frozen, so copying the mapping is enough
    return Book(
        id=book.id,
        title=book.title,
        author=book.author,
        reviews=dict(book.reviews),
    )


# =============================================================================
# Book Store
# =============================================================================
class BookStore:
    """
    Mapping of book id to Book, in id order.

    Book ids never change and books are never removed; only the review
    mapping of a book is mutated.

    Usage:
        store = BookStore.from_seed()
        book = store.get(8)
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._lock = threading.Lock()
        self._books: dict[int, Book] = {}
        for book in sorted(books, key=lambda b: b.id):
            if book.id in self._books:
                raise ValueError(f"Duplicate book id {book.id}")
            self._books[book.id] = book

    @classmethod
    def from_seed(cls, seed: Iterable[dict] = SEED_BOOKS) -> "BookStore":
        """Build a store from plain dicts with id/title/author keys."""
        return cls(Book(**entry) for entry in seed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def all(self) -> list[Book]:
        """Every book, in id order."""
        with self._lock:
            return [_copy_book(book) for book in self._books.values()]

    def get(self, book_id: int) -> Book | None:
        with self._lock:
            book = self._books.get(book_id)
            return _copy_book(book) if book else None

    def filter(self, predicate: Callable[[Book], bool]) -> list[Book]:
        """Linear scan returning the books that match, in id order."""
        with self._lock:
            return [
                _copy_book(book)
                for book in self._books.values()
                if predicate(book)
            ]

    def set_review(self, book_id: int, username: str, review: Review) -> Review | None:
        """
        Store a user's review, replacing any earlier one.

        Returns:
            The stored review, or None if the book does not exist
        """
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                return None
            book.reviews[username] = review
            return review

    def remove_review(self, book_id: int, username: str) -> bool | None:
        """
        Remove a user's review.

        Returns:
            None if the book does not exist, False if the user had no
            review on it, True once removed
        """
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                return None
            return book.reviews.pop(username, None) is not None


# =============================================================================
# User Directory
# =============================================================================
class UserDirectory:
    """Registered users keyed by exact (case-sensitive) username."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, username: str) -> bool:
        with self._lock:
            return username in self._users

    def get(self, username: str) -> User | None:
        with self._lock:
            return self._users.get(username)

    def add(self, user: User) -> bool:
        """
        Insert a user unless the username is taken.

        The existence check and the insert happen under one lock, so two
        concurrent registrations of the same name cannot both succeed.

        Returns:
            True if added, False if the username already exists
        """
        with self._lock:
            if user.username in self._users:
                return False
            self._users[user.username] = user
            return True


# =============================================================================
# Dependency Injection
# =============================================================================
def get_book_store(request: Request) -> BookStore:
    """
    Book Store dependency for FastAPI.

    Usage in Routes:
        @router.get("/")
        def list_books(store: BookStore = Depends(get_book_store)):
            return store.all()
    """
    return request.app.state.book_store


def get_user_directory(request: Request) -> UserDirectory:
    """User Directory dependency for FastAPI."""
    return request.app.state.user_directory
