"""
Domain Models Package

Plain in-memory records held by the Book Store and User Directory.
There is no ORM: records live for the lifetime of the process.

Model Relationships:
- Book -> Review: One-to-Many keyed by username (one review per user per book)

Import models from here:
    from bookstore.models import Book, Review, User
"""

from bookstore.models.book import Book, Review
from bookstore.models.user import User

__all__ = [
    "Book",
    "Review",
    "User",
]
