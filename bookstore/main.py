"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app with its own stores
   - Each test can build a fresh app with a clean catalog

2. Lifespan Events
   - startup/shutdown logging around the running application

3. Middleware Stack
   - CORS: Allow cross-origin requests
   - Sessions: Signed cookie holding the logged-in customer's token

4. Exception Handlers
   - BookstoreError subclasses become {"message": ...} with their status
   - Request validation errors become 400
   - Anything else is logged and returned as a 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from bookstore import __version__
from bookstore.config import get_settings
from bookstore.database import BookStore, UserDirectory
from bookstore.exceptions import BookstoreError
from bookstore.routers import customer_router, general_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Catalog loaded with {len(app.state.book_store)} books")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Exception Handlers
# =============================================================================
async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    """Render a service error with the status it carries."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are client errors (400)."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Invalid input: {location} {first.get('msg', '')}".strip()
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler.

    In production, hide internal errors from users.
    In debug mode, show more details.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    if settings.debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An internal error occurred."},
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    book_store: BookStore | None = None,
    user_directory: UserDirectory | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        book_store: Catalog to serve (defaults to the seed catalog)
        user_directory: Registered users (defaults to an empty directory)

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

A small bookstore catalog.

### Public
- List all books, look up by ISBN, author or title
- Read the reviews of a book
- Register a customer account

### Customers
Log in at `/customer/login`, then add, modify or delete your own reviews
under `/customer/auth/`. The session cookie set at login authenticates
later calls; an `Authorization: Bearer <token>` header works as well.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Stores
    # -------------------------------------------------------------------------
    app.state.book_store = book_store if book_store is not None else BookStore.from_seed()
    app.state.user_directory = user_directory if user_directory is not None else UserDirectory()

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    # The session cookie only travels to /customer routes and lives as long
    # as the access token stored inside it.
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_signing_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.access_token_expire_seconds,
        path=settings.session_cookie_path,
        same_site="lax",
        https_only=settings.is_production,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(customer_router)
    app.include_router(general_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    def health_check() -> dict:
        """Liveness probe with basic store sizes."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "books": len(app.state.book_store),
            "users": len(app.state.user_directory),
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app
app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m bookstore.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
