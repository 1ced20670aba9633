"""Application Use Cases - Interns."""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.intern_dto import (
    InternCreateDTO,
    InternDetailsDTO,
    InternTableDTO,
    InternUpdateDTO,
)
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.recruitment import Intern
from labs.domain.entities.session import UserSession
from labs.domain.repositories.recruitment import IInternRepository
from labs.domain.services.tenancy_guard import TenancyGuard
from labs.domain.services.validation import ensure_period

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class InternManagementUseCase(CompanyScopedUseCase):
    """
    Interns of a company.

    Each intern is followed by a supervisor, an employee of the same company.
    When none is given the caller becomes the supervisor.
    """

    def __init__(
        self, intern_repository: IInternRepository, tenancy_guard: TenancyGuard
    ):
        super().__init__(tenancy_guard)
        self.intern_repository = intern_repository

    async def create(
        self, session: UserSession, company_id: UUID, payload: InternCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)

        supervisor_id = payload.supervisor_id or session.user_id
        await self.tenancy_guard.ensure_member(company_id, supervisor_id)

        values = payload.model_dump(exclude={"supervisor_id"})
        values["email"] = values["email"].lower()
        intern = Intern(**values, supervisor_id=supervisor_id, company_id=company_id)
        await self.intern_repository.create(intern)

        logger.info(
            "Intern created",
            intern_id=str(intern.id),
            supervisor_id=str(supervisor_id),
        )
        return CreatedDTO(id=intern.id)

    async def list_page(
        self,
        session: UserSession,
        company_id: UUID,
        pagination: Pagination,
        supervisor_id: Optional[UUID] = None,
    ) -> PageDTO:
        await self._authorize(session, company_id)
        filters = {"company_id": company_id}
        if supervisor_id is not None:
            filters["supervisor_id"] = supervisor_id
        return await self._paginate(
            self.intern_repository, pagination, InternTableDTO.from_entity, **filters
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        interns = await self.intern_repository.find_all(company_id=company_id)
        return [
            ListItemDTO(id=intern.id, name=f"{intern.first_name} {intern.last_name}")
            for intern in interns
        ]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.intern_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, intern_id: UUID
    ) -> InternDetailsDTO:
        await self._authorize(session, company_id)
        intern = await self._get_in_company(
            self.intern_repository, intern_id, company_id, "Intern"
        )
        return InternDetailsDTO.from_entity(intern)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        intern_id: UUID,
        payload: InternUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        intern = await self._get_in_company(
            self.intern_repository, intern_id, company_id, "Intern"
        )

        changes = self._changes(payload)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        if "supervisor_id" in changes:
            await self.tenancy_guard.ensure_member(company_id, changes["supervisor_id"])

        self._apply(intern, changes)
        ensure_period(intern.start_date, intern.end_date, "internship period")
        await self.intern_repository.update(intern)
        logger.info("Intern updated", intern_id=str(intern_id), fields=sorted(changes))

    async def delete(
        self, session: UserSession, company_id: UUID, intern_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.intern_repository, intern_id, company_id, "Intern"
        )
        await self.intern_repository.delete(intern_id)
        logger.info("Intern deleted", intern_id=str(intern_id))
