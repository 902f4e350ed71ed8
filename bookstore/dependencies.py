"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Provided here:
- Books / Users: the application's in-memory stores
- CustomerIdentity: the verified customer behind a protected request

Usage:
    @router.put("/review/{isbn}")
    def put_review(isbn: str, store: Books, identity: CustomerIdentity):
        ...
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from bookstore.database import BookStore, UserDirectory, get_book_store, get_user_directory
from bookstore.services import gate
from bookstore.services.gate import Identity

# =============================================================================
# Store Type Aliases
# =============================================================================
Books = Annotated[BookStore, Depends(get_book_store)]
Users = Annotated[UserDirectory, Depends(get_user_directory)]


# =============================================================================
# Session/Token Gate
# =============================================================================
def get_current_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """
    Verify the caller of a protected route.

    This dependency:
    1. Reads the access token stored in the session at login
    2. Falls back to the "Authorization: Bearer <token>" header
    3. Verifies signature and expiry (clearing a bad session credential)
    4. Attaches the Identity to request.state for downstream code

    Raises:
        Unauthenticated: 401 if no credential was supplied
        Forbidden: 403 if the credential is invalid or expired
    """
    identity = gate.authenticate(request.session, authorization)
    request.state.identity = identity
    return identity


CustomerIdentity = Annotated[Identity, Depends(get_current_identity)]
