"""Security adapters: password hashing and access tokens."""

from .bcrypt_password_hasher import BcryptPasswordHasher
from .jwt_token_service import JWTTokenService

__all__ = ["BcryptPasswordHasher", "JWTTokenService"]
