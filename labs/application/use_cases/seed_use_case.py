"""
Application Use Case - Root seeding

Creates the root company, user and role described by the ROOT_* settings so
a fresh deployment has an account to sign in with.
"""

from typing import List, Optional

import structlog

from labs.application.dtos.common import CreatedDTO
from labs.domain.entities.errors import ValidationError
from labs.domain.entities.organization import Company, Role, User
from labs.domain.ports.password_hasher import IPasswordHasher
from labs.domain.repositories.organization import (
    ICompanyRepository,
    IRoleRepository,
    IUserRepository,
)

logger = structlog.get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _split(value: Optional[str], expected: int, name: str) -> List[str]:
    parts = [part.strip() for part in (value or "").split(",")]
    if len(parts) < expected or not all(parts[:expected]):
        raise ValidationError(
            f"{name} must contain {expected} comma separated values",
            details={"setting": name},
        )
    return parts


class SeedRootUseCase:
    def __init__(
        self,
        user_repository: IUserRepository,
        company_repository: ICompanyRepository,
        role_repository: IRoleRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.company_repository = company_repository
        self.role_repository = role_repository
        self.password_hasher = password_hasher

    async def execute(
        self,
        company_csv: Optional[str],
        user_csv: Optional[str],
        role_csv: Optional[str],
    ) -> CreatedDTO:
        """
        Seed the root account.

        Args:
            company_csv: ``name``
            user_csv: ``first,last,email,password,country,status``
            role_csv: ``name``

        Returns:
            The root user ID (the existing one when already seeded)

        Raises:
            ValidationError: If a setting is missing or incomplete
        """
        (company_name,) = _split(company_csv, 1, "ROOT_COMPANY")[:1]
        first, last, email, password, country, status = _split(
            user_csv, 6, "ROOT_USER"
        )[:6]
        (role_name,) = _split(role_csv, 1, "ROOT_ROLE")[:1]

        existing = await self.user_repository.find_by_email(email)
        if existing is not None:
            logger.info("Root user already present", user_id=str(existing.id))
            return CreatedDTO(id=existing.id)

        user = User(
            first_name=first,
            last_name=last,
            email=email.lower(),
            password=self.password_hasher.hash(password),
            country=country,
            status=status.lower() in _TRUE_VALUES,
        )
        company = Company(name=company_name, created_by_user_id=user.id)
        role = Role(name=role_name, company_id=company.id, created_by_user_id=user.id)
        user.company_id = company.id
        user.role_id = role.id

        await self.company_repository.create(company)
        await self.role_repository.create(role)
        await self.user_repository.create(user)

        logger.info(
            "Root account seeded",
            company_id=str(company.id),
            user_id=str(user.id),
            role=role_name,
        )
        return CreatedDTO(id=user.id)
