"""
pytest Fixtures for Bookstore API Tests

Every test gets a brand new application built by create_app(), so the
seed catalog is pristine and no users or reviews leak between tests.

FIXTURE SCOPES:
- session: the bcrypt hash of the sample password (hashing is slow)
- function: everything else
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookstore.database import BookStore, UserDirectory
from bookstore.main import create_app
from bookstore.models import User
from bookstore.services.security import create_access_token, hash_password

SAMPLE_USERNAME = "alice"
SAMPLE_PASSWORD = "wonderland"


def get_auth_header(username: str = SAMPLE_USERNAME) -> dict:
    """Create an Authorization header carrying a fresh access token."""
    token = create_access_token(username).token
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# STORE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def sample_password_hash() -> str:
    return hash_password(SAMPLE_PASSWORD)


@pytest.fixture
def book_store() -> BookStore:
    """The seed catalog, freshly built."""
    return BookStore.from_seed()


@pytest.fixture
def user_directory() -> UserDirectory:
    return UserDirectory()


@pytest.fixture
def sample_user(user_directory: UserDirectory, sample_password_hash: str) -> User:
    """A registered customer: alice / wonderland."""
    user = User(username=SAMPLE_USERNAME, password_hash=sample_password_hash)
    user_directory.add(user)
    return user


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================
@pytest.fixture
def app(book_store: BookStore, user_directory: UserDirectory) -> FastAPI:
    return create_app(book_store=book_store, user_directory=user_directory)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client for a fresh application.

    The client keeps cookies between requests, so a login followed by a
    protected call exercises the session path of the gate.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def logged_in_client(client: TestClient, sample_user: User) -> TestClient:
    """A client whose session already holds alice's access token."""
    response = client.post(
        "/customer/login",
        json={"username": SAMPLE_USERNAME, "password": SAMPLE_PASSWORD},
    )
    assert response.status_code == 200
    return client
