"""
Authentication Service

Handles customer registration and login.

- register: validate input, reject duplicates, store a bcrypt hash
- login: check the password hash, issue a one-hour JWT access token

The caller (the customer router) stores the issued token in the session;
this module never touches HTTP state.
"""

import logging

from passlib.exc import PasswordValueError

from bookstore.database import UserDirectory
from bookstore.exceptions import Conflict, Internal, InvalidInput, Unauthorized
from bookstore.models import User
from bookstore.services.security import (
    IssuedToken,
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def password_problem(password: str) -> str | None:
    """
    Check a password against what bcrypt can store.

    Returns:
        A readable reason if the password cannot be stored, else None
    """
    if "\x00" in password:
        return "Password must not contain NUL characters."
    try:
        encoded = password.encode("utf-8")
    except UnicodeEncodeError:
        return "Password must be valid Unicode text."
    if len(encoded) > MAX_PASSWORD_BYTES:
        return f"Password must be at most {MAX_PASSWORD_BYTES} bytes."
    return None


def register(users: UserDirectory, username: str | None, password: str | None) -> User:
    """
    Register a new customer.

    Args:
        users: The User Directory to add to
        username: Requested username (case-sensitive, must be unique)
        password: Plain text password, hashed before storage

    Returns:
        The stored User

    Raises:
        InvalidInput: If username or password is missing or empty, or the
            password is too long or contains a NUL character
        Conflict: If the username is already registered
        Internal: If hashing the password fails
    """
    if not username or not password:
        raise InvalidInput(
            "Unable to register user. Username and password are required."
        )

    problem = password_problem(password)
    if problem:
        raise InvalidInput(f"Unable to register user. {problem}")

    if username in users:
        raise Conflict("User already exists!")

    try:
        password_hash = hash_password(password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed for new user: {e}")
        raise Internal("Error during user registration.") from e

    user = User(username=username, password_hash=password_hash)

    # A concurrent registration may have taken the name while we hashed
    if not users.add(user):
        raise Conflict("User already exists!")

    logger.info(f"New user registered: {username}")
    return user


def authenticate(users: UserDirectory, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Unknown usernames and wrong passwords raise the same error so callers
    cannot probe which usernames exist. A password registration would have
    refused can never match a stored hash, so it is a mismatch too.

    Raises:
        Unauthorized: If the username is unknown or the password is wrong
        Internal: If the stored hash cannot be checked
    """
    user = users.get(username)
    if user is None:
        logger.warning(f"Login failed: user not found for {username}")
        raise Unauthorized()

    if password_problem(password):
        logger.warning(f"Login failed: unusable password for {username}")
        raise Unauthorized()

    try:
        password_ok = verify_password(password, user.password_hash)
    except PasswordValueError as e:
        logger.warning(f"Login failed: password rejected by hasher for {username}: {e}")
        raise Unauthorized() from e
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed for {username}: {e}")
        raise Internal("Error during login.") from e

    if not password_ok:
        logger.warning(f"Login failed: incorrect password for {username}")
        raise Unauthorized()

    return user


def login(users: UserDirectory, username: str | None, password: str | None) -> IssuedToken:
    """
    Log a customer in and issue an access token.

    Returns:
        IssuedToken carrying the JWT (payload: username) and its expiry

    Raises:
        InvalidInput: If username or password is missing
        Unauthorized: If the credentials do not match a registered user
        Internal: If hashing or signing fails
    """
    if not username or not password:
        raise InvalidInput("Username and password are required for login.")

    user = authenticate(users, username, password)
    issued = create_access_token(user.username)

    logger.info(f"User logged in: {user.username}")
    return issued
