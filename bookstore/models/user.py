"""
User Model

Represents a registered customer. Only the bcrypt hash of the password is
kept; the plain password never leaves the registration request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Registered customer.

    Users are created by registration and never updated or deleted.
    Usernames are unique with case-sensitive exact matching.
    """

    username: str
    password_hash: str

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
