"""
Tests for the Async Catalog Client

The client talks to an in-process app through httpx.ASGITransport, so no
server is started.
"""

import asyncio

import httpx
import pytest

from bookstore.client import BookstoreClient, BookstoreClientError, run_catalog_tour


def make_client(app) -> BookstoreClient:
    return BookstoreClient("http://testserver", transport=httpx.ASGITransport(app=app))


class TestBookstoreClient:
    def test_get_all_books(self, app):
        async def scenario():
            async with make_client(app) as client:
                return await client.get_all_books()

        books = asyncio.run(scenario())

        assert len(books) == 10
        assert books["8"]["author"] == "Jane Austen"

    def test_get_book_by_isbn(self, app):
        async def scenario():
            async with make_client(app) as client:
                return await client.get_book_by_isbn(8)

        assert asyncio.run(scenario())["title"] == "Pride and Prejudice"

    def test_author_and_title_are_url_encoded(self, app):
        async def scenario():
            async with make_client(app) as client:
                return (
                    await client.get_books_by_author("Jane Austen"),
                    await client.get_books_by_title("Njál's Saga"),
                )

        by_author, by_title = asyncio.run(scenario())

        assert [book["id"] for book in by_author] == [8]
        assert [book["id"] for book in by_title] == [7]

    def test_not_found_raises(self, app):
        async def scenario():
            async with make_client(app) as client:
                await client.get_book_by_isbn(999)

        with pytest.raises(BookstoreClientError) as exc_info:
            asyncio.run(scenario())

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Book not found with this ISBN."

    def test_get_reviews(self, app):
        async def scenario():
            async with make_client(app) as client:
                return await client.get_reviews(1)

        assert asyncio.run(scenario()) == {}


class TestCatalogTour:
    def test_tour_collects_every_step(self, app):
        async def scenario():
            async with make_client(app) as client:
                return await run_catalog_tour(client)

        results = asyncio.run(scenario())

        assert set(results) == {"all_books", "isbn", "author", "title"}
        assert results["isbn"]["id"] == 8
        assert results["author"][0]["title"] == "Pride and Prejudice"
        assert results["title"][0]["author"] == "Jane Austen"

    def test_tour_records_failures_as_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"message": "down"})

        async def scenario():
            transport = httpx.MockTransport(handler)
            async with BookstoreClient("http://testserver", transport=transport) as client:
                return await run_catalog_tour(client)

        results = asyncio.run(scenario())

        assert results == {"all_books": None, "isbn": None, "author": None, "title": None}
