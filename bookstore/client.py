"""
Bookstore HTTP Client

Async client for the public catalog endpoints, built on httpx.

Usage:
    async with BookstoreClient("http://localhost:5000") as client:
        books = await client.get_all_books()
        pride = await client.get_book_by_isbn(8)

Run the catalog tour against a running server:
    BOOKSTORE_URL=http://localhost:5000 python -m bookstore.client
"""

import asyncio
import logging
import os
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = 10.0


class BookstoreClientError(Exception):
    """A catalog request came back with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class BookstoreClient:
    """
    Thin async wrapper over the public endpoints.

    Args:
        base_url: Server root, e.g. http://localhost:5000
        transport: Optional httpx transport (tests pass an ASGITransport)
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "BookstoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str):
        response = await self._client.get(path)
        if response.is_error:
            try:
                message = response.json().get("message", response.text)
            except ValueError:
                message = response.text
            raise BookstoreClientError(response.status_code, message)
        return response.json()

    async def get_all_books(self) -> dict:
        """All books keyed by id (ids are strings in JSON)."""
        return await self._get("/")

    async def get_book_by_isbn(self, isbn: int | str) -> dict:
        return await self._get(f"/isbn/{quote(str(isbn), safe='')}")

    async def get_books_by_author(self, author: str) -> list[dict]:
        return await self._get(f"/author/{quote(author, safe='')}")

    async def get_books_by_title(self, title: str) -> list[dict]:
        return await self._get(f"/title/{quote(title, safe='')}")

    async def get_reviews(self, isbn: int | str) -> dict:
        return await self._get(f"/review/{quote(str(isbn), safe='')}")


async def run_catalog_tour(client: BookstoreClient) -> dict:
    """
    Walk the public catalog: all books, ISBN 8, books by Jane Austen and
    books titled Pride and Prejudice. Failed steps are logged and recorded
    as None.

    Returns:
        Results keyed by step name
    """
    steps = {
        "all_books": client.get_all_books,
        "isbn": lambda: client.get_book_by_isbn(8),
        "author": lambda: client.get_books_by_author("Jane Austen"),
        "title": lambda: client.get_books_by_title("Pride and Prejudice"),
    }

    results: dict = {}
    for name, call in steps.items():
        try:
            results[name] = await call()
            logger.info(f"{name}: {results[name]}")
        except (BookstoreClientError, httpx.HTTPError) as e:
            logger.error(f"{name} failed: {e}")
            results[name] = None
    return results


async def _main() -> None:
    base_url = os.environ.get("BOOKSTORE_URL", DEFAULT_BASE_URL)
    async with BookstoreClient(base_url) as client:
        await run_catalog_tour(client)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(_main())
