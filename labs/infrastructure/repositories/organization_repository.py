"""
MongoDB Organization Repositories - Infrastructure Layer

Companies, users and roles.
"""

from typing import Optional

from labs.domain.entities.organization import Company, Role, User
from labs.domain.repositories.organization import (
    ICompanyRepository,
    IRoleRepository,
    IUserRepository,
)

from .base_repository import MongoRepository


class CompanyRepository(MongoRepository[Company], ICompanyRepository):
    COLLECTION_NAME = "companies"
    RESOURCE_NAME = "Company"
    ENTITY_CLASS = Company


class UserRepository(MongoRepository[User], IUserRepository):
    COLLECTION_NAME = "users"
    RESOURCE_NAME = "User"
    ENTITY_CLASS = User

    async def find_by_email(self, email: str) -> Optional[User]:
        """Emails are stored lower-cased, so the lookup normalizes too."""
        return await self.find_one(email=email.strip().lower())


class RoleRepository(MongoRepository[Role], IRoleRepository):
    COLLECTION_NAME = "roles"
    RESOURCE_NAME = "Role"
    ENTITY_CLASS = Role
