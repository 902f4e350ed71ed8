"""
Book Pydantic Schemas

Schemas:
- ReviewResponse: One review as stored (text + timestamp)
- BookResponse: Full book data including its reviews keyed by username
"""

from pydantic import BaseModel, ConfigDict, Field

from bookstore.models import Book, Review


class ReviewResponse(BaseModel):
    """A single review."""

    text: str = Field(..., description="Review text")
    timestamp: str = Field(
        ...,
        description="When the review was last written (ISO-8601, UTC)",
        examples=["2024-05-01T10:00:00.000Z"],
    )

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_review(cls, review: Review) -> "ReviewResponse":
        return cls.model_validate(review)


class BookResponse(BaseModel):
    """
    Book data returned by the catalog endpoints.

    Example response:
    {
        "id": 8,
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "reviews": {}
    }
    """

    id: int = Field(..., description="Book identifier (the ISBN in URLs)", examples=[8])
    title: str = Field(..., examples=["Pride and Prejudice"])
    author: str = Field(..., examples=["Jane Austen"])
    reviews: dict[str, ReviewResponse] = Field(
        default_factory=dict,
        description="Reviews keyed by username",
    )

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls.model_validate(book.to_dict())
