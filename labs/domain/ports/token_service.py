"""Domain port for access token issuance and verification."""

from __future__ import annotations

from typing import Protocol, Sequence

from labs.domain.entities.organization import Role, User
from labs.domain.entities.session import UserSession


class ITokenService(Protocol):
    """Issues bearer tokens for employees and decodes them back into sessions."""

    def issue(self, user: User, roles: Sequence[Role]) -> str:
        """Create a signed access token for the user."""
        ...

    def decode(self, token: str) -> UserSession:
        """Decode a token.

        Raises:
            AuthenticationError: If the token is malformed, expired or forged.
        """
        ...
