"""Repository interfaces for companies, users and roles."""

from abc import abstractmethod
from typing import Optional

from labs.domain.entities.organization import Company, Role, User

from .base import IRepository


class ICompanyRepository(IRepository[Company]):
    """Interface for company repository."""


class IUserRepository(IRepository[User]):
    """Interface for user repository."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, case-insensitively."""
        pass


class IRoleRepository(IRepository[Role]):
    """Interface for role repository."""
