"""
User Pydantic Schemas

Schemas:
- CredentialsRequest: username/password body for register and login
- MessageResponse: plain acknowledgement
- TokenResponse: login result carrying the JWT access token

Credentials are deliberately permissive (both fields optional, no length
limits). Registration rules live in the auth service; login answers 401 for
anything that does not match a stored account.
"""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """
    Registration / login body.

    Example request body:
    {
        "username": "alice",
        "password": "wonderland"
    }
    """

    username: str | None = Field(
        default=None,
        description="Username (case-sensitive)",
        examples=["alice"],
    )
    password: str | None = Field(
        default=None,
        description="Plain text password (at most 72 UTF-8 bytes, no NUL characters)",
        examples=["wonderland"],
    )


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    """
    Response for a successful login.

    The same token is also stored in the session cookie, so browser clients
    do not need to send it back explicitly.
    """

    message: str = Field(default="Login successful.")
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")
    expires_in: int = Field(..., description="Token lifetime in seconds", examples=[3600])
