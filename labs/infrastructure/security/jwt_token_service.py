"""
JWT Token Service - Infrastructure Layer

HS256 access tokens carrying the employee, its company and its roles.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Sequence
from uuid import UUID

import jwt
import structlog

from labs.domain.entities.errors import AuthenticationError
from labs.domain.entities.organization import Role, User
from labs.domain.entities.session import SessionRole, UserSession
from labs.domain.ports.token_service import ITokenService

logger = structlog.get_logger(__name__)


def _optional_uuid(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


class JWTTokenService(ITokenService):
    """Issue and verify bearer tokens with PyJWT."""

    def __init__(
        self, secret: str, duration_hours: int = 24, algorithm: str = "HS256"
    ):
        self._secret = secret
        self._duration = timedelta(hours=duration_hours)
        self._algorithm = algorithm

    def issue(self, user: User, roles: Sequence[Role]) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "user_id": str(user.id),
            "company_id": str(user.company_id),
            "roles": [
                {
                    "id": str(role.id),
                    "name": role.name,
                    "company_id": str(role.company_id) if role.company_id else None,
                }
                for role in roles
            ],
            "iat": now,
            "exp": now + self._duration,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> UserSession:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "user_id", "company_id"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.info("auth.token.invalid", error=str(e))
            raise AuthenticationError("Invalid token") from e

        try:
            return UserSession(
                user_id=UUID(payload["user_id"]),
                company_id=UUID(payload["company_id"]),
                roles=[
                    SessionRole(
                        id=UUID(role["id"]),
                        name=role["name"],
                        company_id=_optional_uuid(role.get("company_id")),
                    )
                    for role in payload.get("roles") or []
                ],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise AuthenticationError("Malformed token claims") from e
