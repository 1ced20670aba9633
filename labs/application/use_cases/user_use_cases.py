"""
Application Use Cases - Users

Employees of a company. Users are created with a role name that is resolved
inside the company; emails are unique across the whole platform.
"""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.user_dto import (
    GenderDistributionDTO,
    UserCreateDTO,
    UserDetailsDTO,
    UserTableDTO,
    UserUpdateDTO,
)
from labs.domain.entities.errors import DuplicateError, NotFoundError
from labs.domain.entities.organization import Role, User
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.ports.password_hasher import IPasswordHasher
from labs.domain.repositories.organization import (
    ICompanyRepository,
    IRoleRepository,
    IUserRepository,
)
from labs.domain.services.statistics import gender_percentages
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)

MALE = "male"


def _normalize_gender(gender: Optional[str]) -> Optional[str]:
    return gender.strip().lower() if gender else gender


class UserManagementUseCase(CompanyScopedUseCase):
    """Use case for managing the employees of a company."""

    def __init__(
        self,
        user_repository: IUserRepository,
        role_repository: IRoleRepository,
        company_repository: ICompanyRepository,
        password_hasher: IPasswordHasher,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.company_repository = company_repository
        self.password_hasher = password_hasher

    async def _resolve_role(self, company_id: UUID, role_name: str) -> Role:
        role = await self.role_repository.find_one(company_id=company_id, name=role_name)
        if role is None:
            raise NotFoundError("Role", details={"name": role_name})
        return role

    async def _ensure_email_available(
        self, email: str, current_user_id: Optional[UUID] = None
    ) -> None:
        existing = await self.user_repository.find_by_email(email)
        if existing is not None and existing.id != current_user_id:
            raise DuplicateError("Email already in use", details={"email": email})

    async def create(
        self, session: UserSession, company_id: UUID, payload: UserCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)

        email = payload.email.lower()
        await self._ensure_email_available(email)
        role = await self._resolve_role(company_id, payload.role_name)

        user = User(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=email,
            password=self.password_hasher.hash(payload.password),
            gender=_normalize_gender(payload.gender),
            country=payload.country,
            address=payload.address,
            phone_number=payload.phone_number,
            departement_name=payload.departement_name,
            date_of_birth=payload.date_of_birth,
            date_of_hire=payload.date_of_hire,
            leave_balance=payload.leave_balance,
            role_id=role.id,
            company_id=company_id,
            status=True,
        )
        await self.user_repository.create(user)

        logger.info(
            "User created",
            user_id=str(user.id),
            company_id=str(company_id),
            role=role.name,
        )
        return CreatedDTO(id=user.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.user_repository,
            pagination,
            UserTableDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        users = await self.user_repository.find_all(company_id=company_id)
        return [ListItemDTO(id=user.id, name=user.full_name) for user in users]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        return CountDTO(count=await self.user_repository.count(company_id=company_id))

    async def get(
        self, session: UserSession, company_id: UUID, user_id: UUID
    ) -> UserDetailsDTO:
        await self._authorize(session, company_id)
        user = await self._get_in_company(
            self.user_repository, user_id, company_id, "User"
        )

        role = (
            await self.role_repository.find_by_id(user.role_id)
            if user.role_id
            else None
        )
        company = await self.company_repository.find_by_id(company_id)
        return UserDetailsDTO.from_entity(
            user,
            role_name=role.name if role else None,
            company_name=company.name if company else None,
        )

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        user_id: UUID,
        payload: UserUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        user = await self._get_in_company(
            self.user_repository, user_id, company_id, "User"
        )

        changes = self._changes(payload)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
            await self._ensure_email_available(changes["email"], user.id)
        if "password" in changes:
            changes["password"] = self.password_hasher.hash(changes["password"])
        if "gender" in changes:
            changes["gender"] = _normalize_gender(changes["gender"])
        role_name = changes.pop("role_name", None)
        if role_name is not None:
            changes["role_id"] = (await self._resolve_role(company_id, role_name)).id

        self._apply(user, changes)
        await self.user_repository.update(user)
        logger.info("User updated", user_id=str(user_id), fields=sorted(changes))

    async def delete(
        self, session: UserSession, company_id: UUID, user_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(self.user_repository, user_id, company_id, "User")
        await self.user_repository.delete(user_id)
        logger.info("User deleted", user_id=str(user_id), company_id=str(company_id))

    async def gender_distribution(
        self, session: UserSession, company_id: UUID
    ) -> GenderDistributionDTO:
        """Percentage of male and female employees, rounded to integers."""
        await self._authorize(session, company_id)
        total = await self.user_repository.count(company_id=company_id)
        male = await self.user_repository.count(company_id=company_id, gender=MALE)
        male_percentage, female_percentage = gender_percentages(total, male)
        return GenderDistributionDTO(
            male_percentage=male_percentage, female_percentage=female_percentage
        )
