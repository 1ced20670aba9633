"""Application Use Cases - Professional experience of employees."""

from typing import List
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.workforce_dto import (
    UserExperienceCreateDTO,
    UserExperienceDTO,
    UserExperienceUpdateDTO,
)
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.entities.workforce import UserExperience
from labs.domain.repositories.workforce import IUserExperienceRepository
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class UserExperienceManagementUseCase(CompanyScopedUseCase):
    """Experience entries are created for one employee and listed per company."""

    def __init__(
        self,
        experience_repository: IUserExperienceRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.experience_repository = experience_repository

    async def create(
        self,
        session: UserSession,
        company_id: UUID,
        user_id: UUID,
        payload: UserExperienceCreateDTO,
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self.tenancy_guard.ensure_member(company_id, user_id)

        experience = UserExperience(
            professional_training=payload.professional_training,
            user_id=user_id,
            company_id=company_id,
        )
        await self.experience_repository.create(experience)
        logger.info(
            "User experience created",
            experience_id=str(experience.id),
            user_id=str(user_id),
        )
        return CreatedDTO(id=experience.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.experience_repository,
            pagination,
            UserExperienceDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        entries = await self.experience_repository.find_all(company_id=company_id)
        return [
            ListItemDTO(id=entry.id, name=entry.professional_training)
            for entry in entries
        ]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.experience_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, experience_id: UUID
    ) -> UserExperienceDTO:
        await self._authorize(session, company_id)
        experience = await self._get_in_company(
            self.experience_repository, experience_id, company_id, "User experience"
        )
        return UserExperienceDTO.from_entity(experience)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        experience_id: UUID,
        payload: UserExperienceUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        experience = await self._get_in_company(
            self.experience_repository, experience_id, company_id, "User experience"
        )
        self._apply(experience, self._changes(payload))
        await self.experience_repository.update(experience)
        logger.info("User experience updated", experience_id=str(experience_id))

    async def delete(
        self, session: UserSession, company_id: UUID, experience_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.experience_repository, experience_id, company_id, "User experience"
        )
        await self.experience_repository.delete(experience_id)
        logger.info("User experience deleted", experience_id=str(experience_id))
