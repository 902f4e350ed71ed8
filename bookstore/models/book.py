"""
Book Model

Represents a catalog entry and the reviews customers left on it.

Business Rules:
- The numeric id is the book's key (called "ISBN" on the HTTP surface)
- One review per user per book, keyed by username (last write wins)
- Books are seeded at startup and never deleted
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Review:
    """
    A single customer's review of a book.

    Attributes:
        text: Review body
        timestamp: When the review was last written (ISO-8601, UTC)
    """

    text: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        return {"text": self.text, "timestamp": self.timestamp}


@dataclass
class Book:
    """
    Book record.

    Attributes:
        id: Stable integer identifier
        title: Book title
        author: Author display name
        reviews: Mapping of username to that user's review
    """

    id: int
    title: str
    author: str
    reviews: dict[str, Review] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "reviews": {
                username: review.to_dict()
                for username, review in self.reviews.items()
            },
        }

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}')>"
