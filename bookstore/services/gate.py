"""
Session/Token Gate

Decides whether a request to a protected customer route may proceed.

Flow:
=====
1. Take the access token stored in the session at login; if there is none,
   fall back to an "Authorization: Bearer <token>" header.
2. No token from either source: 401 (Unauthenticated).
3. Token fails signature or expiry checks: the session credential is
   cleared and the request gets 403 (Forbidden).
4. Token verifies: an immutable Identity is handed to the route.

    NO_SESSION --token found--> HAS_UNVERIFIED_TOKEN --valid--> AUTHENTICATED
        |                              |
        no token (401)                 invalid/expired --> REJECTED (403)

The gate works on a plain mutable mapping for the session so it can be
exercised without an HTTP request; dependencies.py wires it to
request.session.
"""

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

from bookstore.exceptions import Forbidden, Unauthenticated
from bookstore.services.security import IssuedToken, verify_access_token

logger = logging.getLogger(__name__)

# Key under which login stores the credential in the session
SESSION_KEY = "authorization"
BEARER_SCHEME = "bearer"


class GateState(str, Enum):
    """States a request passes through at the gate."""

    NO_SESSION = "no_session"
    HAS_UNVERIFIED_TOKEN = "has_unverified_token"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Identity:
    """The verified customer behind a request."""

    username: str


@dataclass(frozen=True)
class GateResult:
    """Outcome of a gate step: the state reached, who (if authenticated) and the token seen."""

    state: GateState
    identity: Identity | None = None
    token: str | None = None


def store_session_credential(session: MutableMapping, issued: IssuedToken) -> None:
    """Record a freshly issued token as the session's active credential."""
    session[SESSION_KEY] = {
        "access_token": issued.token,
        "username": issued.username,
        "issued_at": issued.issued_at.isoformat(),
        "expires_at": issued.expires_at.isoformat(),
    }


def clear_session_credential(session: MutableMapping) -> None:
    session.pop(SESSION_KEY, None)


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an Authorization header value.

    Returns:
        The token for "Bearer <token>" (scheme is case-insensitive),
        None for a missing header or any other scheme
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    return token.strip() or None


def session_token(session: MutableMapping) -> str | None:
    credential = session.get(SESSION_KEY)
    if not isinstance(credential, dict):
        return None
    return credential.get("access_token") or None


def locate(session: MutableMapping, authorization: str | None) -> GateResult:
    """
    Find the request's credential without verifying it.

    Returns:
        GateResult in state HAS_UNVERIFIED_TOKEN carrying the token found
        (session first, then the Bearer header), or NO_SESSION if neither
        source holds one. The session is never modified here.
    """
    token = session_token(session)
    if token is None:
        token = extract_bearer_token(authorization)
    if token is None:
        return GateResult(GateState.NO_SESSION)
    return GateResult(GateState.HAS_UNVERIFIED_TOKEN, token=token)


def evaluate(session: MutableMapping, authorization: str | None) -> GateResult:
    """
    Run the gate without raising.

    Args:
        session: The request's session mapping (mutated on rejection)
        authorization: Raw Authorization header value, if any

    Returns:
        GateResult whose state is NO_SESSION (no credential at all),
        REJECTED (credential failed verification) or AUTHENTICATED
    """
    found = locate(session, authorization)
    if found.state is GateState.NO_SESSION:
        return found

    username = verify_access_token(found.token)
    if username is None:
        clear_session_credential(session)
        return GateResult(GateState.REJECTED)

    return GateResult(
        GateState.AUTHENTICATED,
        Identity(username=username),
        token=found.token,
    )


def authenticate(session: MutableMapping, authorization: str | None) -> Identity:
    """
    Run the gate and return the verified identity.

    Raises:
        Unauthenticated: No credential in the session or the header
        Forbidden: A credential was found but is invalid or expired
    """
    result = evaluate(session, authorization)

    if result.state is GateState.NO_SESSION:
        logger.info("Gate: request without credential rejected")
        raise Unauthenticated()

    if result.state is GateState.REJECTED:
        logger.warning("Gate: invalid or expired credential rejected")
        raise Forbidden()

    return result.identity
