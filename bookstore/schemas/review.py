"""
Review Pydantic Schemas

Responses for the protected review endpoints.

Business Rules:
- One review per user per book (a second write replaces the first)
- Users can only write or delete their own review
"""

from pydantic import BaseModel, Field

from bookstore.schemas.book import ReviewResponse


class ReviewWrittenResponse(BaseModel):
    """Returned after adding or replacing a review."""

    message: str = Field(
        ...,
        examples=["Review for ISBN 8 by alice successfully added/modified."],
    )
    review: ReviewResponse


class ReviewDeletedResponse(BaseModel):
    """Returned after deleting a review."""

    message: str = Field(
        ...,
        examples=["Review for ISBN 8 by alice successfully deleted."],
    )
