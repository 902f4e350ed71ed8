"""
Test Suite for the Bookstore API

Test Organization:
- conftest.py: Shared fixtures (fresh app, client, registered customer)
- test_catalog.py: Public catalog endpoints and the catalog service
- test_user_auth.py: Registration and login
- test_gate.py: Session/bearer token gate
- test_reviews.py: Protected review endpoints and the review service
- test_database.py: In-memory stores
- test_security.py: Password hashing and JWT tokens
- test_client.py: Async httpx client
- test_config.py: Settings validation

Running Tests:
    pytest
    pytest --cov=bookstore --cov-report=html
    pytest tests/test_gate.py -v
"""
