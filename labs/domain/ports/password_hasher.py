"""Domain port for password hashing."""

from __future__ import annotations

from typing import Protocol


class IPasswordHasher(Protocol):
    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        ...

    def verify(self, password: str, hashed: str) -> bool:
        """Check a clear-text password against a stored hash."""
        ...
