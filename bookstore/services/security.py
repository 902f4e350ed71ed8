"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. JWT token generation and validation (python-jose, HS256)
3. Secure password verification

Usage:
    from bookstore.services.security import hash_password, verify_password

    hashed = hash_password("SecurePass123")
    is_valid = verify_password("SecurePass123", hashed)
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore.config import get_settings

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("SecurePass123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class IssuedToken:
    """An access token together with its validity window."""

    token: str
    username: str
    issued_at: datetime
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        """Lifetime in whole seconds."""
        return int((self.expires_at - self.issued_at).total_seconds())


def create_access_token(
    username: str,
    expires_delta: timedelta | None = None,
) -> IssuedToken:
    """
    Create a signed JWT access token for a username.

    Args:
        username: Stored as the "sub" claim
        expires_delta: Optional custom lifetime (defaults to
            settings.access_token_expire_minutes)

    Returns:
        IssuedToken with the encoded JWT and its issue/expiry times

    Example:
        >>> issued = create_access_token("alice")
        >>> issued.token.count(".") == 2  # header.payload.signature
        True
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    issued_at = datetime.now(UTC)
    expires_at = issued_at + expires_delta

    to_encode = {
        "sub": username,
        "iat": issued_at,
        "exp": expires_at,
        "type": ACCESS_TOKEN_TYPE,
    }
    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)

    return IssuedToken(
        token=encoded_jwt,
        username=username,
        issued_at=issued_at,
        expires_at=expires_at,
    )


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a JWT token.

    Signature and the "exp" claim are both checked by jose.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None


def verify_access_token(token: str) -> str | None:
    """
    Decode an access token and return its username.

    Returns:
        The "sub" claim if the token is a valid, unexpired access token,
        None otherwise
    """
    payload = decode_token(token)
    if payload is None:
        return None

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        logger.warning(f"Token type mismatch: expected {ACCESS_TOKEN_TYPE}")
        return None

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        logger.warning("Token payload has no subject")
        return None

    return username
