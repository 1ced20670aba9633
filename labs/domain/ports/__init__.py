"""Domain ports package."""

from .health_check import IHealthCheckService
from .password_hasher import IPasswordHasher
from .token_service import ITokenService

__all__ = ["IHealthCheckService", "IPasswordHasher", "ITokenService"]
