"""
Bookstore Catalog Package

A small bookstore catalog service: public read endpoints over an in-memory
catalog, plus registered customers who log in and manage their own reviews.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: In-memory Book Store and User Directory
- exceptions.py: Error taxonomy mapped to HTTP status codes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions (stores, authenticated identity)
- client.py: Async HTTP client for the public catalog endpoints
- models/: Plain domain records (Book, User, Review)
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (auth, token gate, catalog queries, reviews)
"""

__version__ = "0.1.0"
