"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Reusable across different parts of the application
- Easier to test in isolation

Current services:
- auth.py: Customer registration and login
- catalog.py: Read-only catalog queries (ISBN, author, title, reviews)
- gate.py: Session/bearer token gate for protected customer routes
- reviews.py: Per-user review upsert and delete
- security.py: Password hashing and JWT utilities
"""
