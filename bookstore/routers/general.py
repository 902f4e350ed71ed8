"""
General (Public) Router

Endpoints that need no authentication.

Endpoints:
- GET / - All books, keyed by id
- GET /isbn/{isbn} - One book by id
- GET /author/{author} - Books whose author contains the text (case-insensitive)
- GET /title/{title} - Books whose title contains the text (case-insensitive)
- GET /review/{isbn} - Reviews of one book, keyed by username
- POST /register - Create a customer account
"""

from fastapi import APIRouter, status

from bookstore.dependencies import Books, Users
from bookstore.schemas import (
    BookResponse,
    CredentialsRequest,
    MessageResponse,
    ReviewResponse,
)
from bookstore.services import auth, catalog

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    tags=["Catalog"],
    responses={
        404: {"description": "Book not found"},
    },
)


# =============================================================================
# Catalog Endpoints
# =============================================================================
@router.get(
    "/",
    response_model=dict[int, BookResponse],
    summary="List all books",
    description="Return every book in the shop, keyed by its id.",
)
def list_books(store: Books) -> dict[int, BookResponse]:
    return {
        book_id: BookResponse.from_book(book)
        for book_id, book in catalog.get_all(store).items()
    }


@router.get(
    "/isbn/{isbn}",
    response_model=BookResponse,
    summary="Get book by ISBN",
)
def get_book_by_isbn(isbn: str, store: Books) -> BookResponse:
    """
    Get a single book by its identifier.

    Non-numeric identifiers are treated as unknown books (404).
    """
    return BookResponse.from_book(catalog.get_by_isbn(store, isbn))


@router.get(
    "/author/{author}",
    response_model=list[BookResponse],
    summary="Get books by author",
    description="Case-insensitive partial match on the author name.",
)
def get_books_by_author(author: str, store: Books) -> list[BookResponse]:
    return [BookResponse.from_book(book) for book in catalog.get_by_author(store, author)]


@router.get(
    "/title/{title}",
    response_model=list[BookResponse],
    summary="Get books by title",
    description="Case-insensitive partial match on the title.",
)
def get_books_by_title(title: str, store: Books) -> list[BookResponse]:
    return [BookResponse.from_book(book) for book in catalog.get_by_title(store, title)]


@router.get(
    "/review/{isbn}",
    response_model=dict[str, ReviewResponse],
    summary="Get book reviews",
    description="Reviews of a book keyed by username; empty if it has none.",
)
def get_book_reviews(isbn: str, store: Books) -> dict[str, ReviewResponse]:
    return {
        username: ReviewResponse.from_review(review)
        for username, review in catalog.get_reviews(store, isbn).items()
    }


# =============================================================================
# Registration Endpoint
# =============================================================================
@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new customer",
    tags=["Authentication"],
    responses={
        400: {"description": "Username or password missing"},
        409: {"description": "Username already taken"},
    },
)
def register(users: Users, credentials: CredentialsRequest | None = None) -> MessageResponse:
    """
    Register a customer with username and password.

    The handler is synchronous so bcrypt hashing runs in the thread pool,
    not on the event loop.
    """
    credentials = credentials or CredentialsRequest()
    auth.register(users, credentials.username, credentials.password)
    return MessageResponse(message="User successfully registered. You can now login.")
