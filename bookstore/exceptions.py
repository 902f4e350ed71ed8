"""
Bookstore Errors

Every failure a service can report is one of the classes below. Each carries
the HTTP status it maps to, so routers never build HTTPException themselves:
services raise, and the handler registered in main.py renders the response
as {"message": ...}.

Taxonomy:
- InvalidInput     400  missing/empty fields, empty review text
- Unauthorized     401  unknown username or wrong password at login
- Unauthenticated  401  protected route called without any credential
- Forbidden        403  credential present but invalid or expired
- NotFound         404  unknown book, no matches, no review to delete
- Conflict         409  username already registered
- Internal         500  e.g. password hashing failure
"""

from fastapi import status


class BookstoreError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An internal error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(BookstoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class Unauthorized(BookstoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password."


class Unauthenticated(BookstoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "User not logged in. Authentication required."


class Forbidden(BookstoreError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Authentication token is invalid or expired. Forbidden."


class NotFound(BookstoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(BookstoreError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User already exists!"


class Internal(BookstoreError):
    pass
