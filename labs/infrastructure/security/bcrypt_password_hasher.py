"""Bcrypt password hashing - Infrastructure Layer."""

import bcrypt

from labs.domain.ports.password_hasher import IPasswordHasher

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False
