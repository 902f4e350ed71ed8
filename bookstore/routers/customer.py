"""
Customer Router

Login plus the review endpoints reserved for logged-in customers.

Endpoints:
- POST /customer/login - Authenticate and start a session
- PUT /customer/auth/review/{isbn}?review=<text> - Add or replace own review
- DELETE /customer/auth/review/{isbn} - Delete own review

Every route under /customer/auth passes through the session/token gate
(get_current_identity) before the handler runs.

Security:
=========
- The access token is returned in the body and stored in the signed
  session cookie
- Protected routes accept either the session or an
  "Authorization: Bearer <token>" header
"""

from fastapi import APIRouter, Depends, Query, Request

from bookstore.dependencies import Books, CustomerIdentity, Users, get_current_identity
from bookstore.schemas import (
    CredentialsRequest,
    ReviewDeletedResponse,
    ReviewResponse,
    ReviewWrittenResponse,
    TokenResponse,
)
from bookstore.services import auth, reviews
from bookstore.services.gate import store_session_credential

router = APIRouter(
    prefix="/customer",
    tags=["Customer"],
)

# Everything registered on this router sits behind the gate
protected = APIRouter(
    prefix="/auth",
    dependencies=[Depends(get_current_identity)],
    responses={
        401: {"description": "No credential supplied"},
        403: {"description": "Credential invalid or expired"},
    },
)


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login as a registered customer",
    tags=["Authentication"],
    responses={
        400: {"description": "Username or password missing"},
        401: {"description": "Invalid username or password"},
    },
)
def login(
    request: Request,
    users: Users,
    credentials: CredentialsRequest | None = None,
) -> TokenResponse:
    """
    Authenticate and issue a one-hour access token.

    The token is stored in the session so later calls to /customer/auth/*
    from the same client are authenticated without a header.
    """
    credentials = credentials or CredentialsRequest()
    issued = auth.login(users, credentials.username, credentials.password)

    store_session_credential(request.session, issued)

    return TokenResponse(
        access_token=issued.token,
        token_type="bearer",
        expires_in=issued.expires_in,
    )


# -------------------------------------------------------------------------
# Review Endpoints (protected)
# -------------------------------------------------------------------------
@protected.put(
    "/review/{isbn}",
    response_model=ReviewWrittenResponse,
    summary="Add or modify your review",
    responses={
        400: {"description": "Review text missing"},
        404: {"description": "Book not found"},
    },
)
def put_review(
    isbn: str,
    store: Books,
    identity: CustomerIdentity,
    review: str | None = Query(default=None, description="Review text"),
) -> ReviewWrittenResponse:
    """Add a review, or replace the one this customer already wrote."""
    stored = reviews.upsert_review(store, isbn, identity.username, review)
    return ReviewWrittenResponse(
        message=f"Review for ISBN {isbn} by {identity.username} successfully added/modified.",
        review=ReviewResponse.from_review(stored),
    )


@protected.delete(
    "/review/{isbn}",
    response_model=ReviewDeletedResponse,
    summary="Delete your review",
    responses={
        404: {"description": "Book not found or no review by this customer"},
    },
)
def delete_review(
    isbn: str,
    store: Books,
    identity: CustomerIdentity,
) -> ReviewDeletedResponse:
    """Delete this customer's review; other customers' reviews are untouched."""
    reviews.delete_review(store, isbn, identity.username)
    return ReviewDeletedResponse(
        message=f"Review for ISBN {isbn} by {identity.username} successfully deleted.",
    )


router.include_router(protected)
