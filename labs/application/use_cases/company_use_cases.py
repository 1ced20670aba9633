"""Application Use Cases - Companies."""

from uuid import UUID

import structlog

from labs.application.dtos.common import CreatedDTO, PageDTO
from labs.application.dtos.company_dto import (
    CompanyCreateDTO,
    CompanyDTO,
    CompanyUpdateDTO,
)
from labs.domain.entities.errors import NotFoundError
from labs.domain.entities.organization import Company
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.repositories.organization import ICompanyRepository
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class CompanyManagementUseCase(CompanyScopedUseCase):
    """
    Company administration.

    A session only ever sees its own company; the company ID in the path is
    checked with the tenancy guard before reading or changing it.
    """

    def __init__(
        self, company_repository: ICompanyRepository, tenancy_guard: TenancyGuard
    ):
        super().__init__(tenancy_guard)
        self.company_repository = company_repository

    async def create(
        self, session: UserSession, payload: CompanyCreateDTO
    ) -> CreatedDTO:
        company = Company(
            name=payload.name,
            email=payload.email.lower() if payload.email else None,
            website=payload.website,
            created_by_user_id=session.user_id,
        )
        await self.company_repository.create(company)
        logger.info(
            "Company created",
            company_id=str(company.id),
            user_id=str(session.user_id),
        )
        return CreatedDTO(id=company.id)

    async def list_page(
        self, session: UserSession, pagination: Pagination
    ) -> PageDTO:
        """List the companies visible to the session (its own company)."""
        return await self._paginate(
            self.company_repository,
            pagination,
            CompanyDTO.from_entity,
            id=session.company_id,
        )

    async def _load(self, company_id: UUID) -> Company:
        company = await self.company_repository.find_by_id(company_id)
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    async def get(self, session: UserSession, company_id: UUID) -> CompanyDTO:
        await self._authorize(session, company_id)
        return CompanyDTO.from_entity(await self._load(company_id))

    async def update(
        self, session: UserSession, company_id: UUID, payload: CompanyUpdateDTO
    ) -> None:
        await self._authorize(session, company_id)
        company = await self._load(company_id)

        changes = self._changes(payload)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        self._apply(company, changes)
        await self.company_repository.update(company)
        logger.info("Company updated", company_id=str(company_id))

    async def delete(self, session: UserSession, company_id: UUID) -> None:
        await self._authorize(session, company_id)
        await self._load(company_id)
        await self.company_repository.delete(company_id)
        logger.info("Company deleted", company_id=str(company_id))
