"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schemas are kept apart from the domain records in models/ so the API
controls exactly what is exposed (never a password hash) and so the
OpenAPI documentation describes every response.
"""

from bookstore.schemas.book import BookResponse, ReviewResponse
from bookstore.schemas.review import ReviewDeletedResponse, ReviewWrittenResponse
from bookstore.schemas.user import CredentialsRequest, MessageResponse, TokenResponse

__all__ = [
    # Book schemas
    "BookResponse",
    "ReviewResponse",
    # Review schemas
    "ReviewWrittenResponse",
    "ReviewDeletedResponse",
    # User schemas
    "CredentialsRequest",
    "MessageResponse",
    "TokenResponse",
]
