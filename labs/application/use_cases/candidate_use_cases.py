"""
Application Use Cases - Candidates

Candidates ("condidats") are managed by company employees and can sign in
on their own to take the tests generated for them.
"""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.candidate_dto import (
    CandidateCreateDTO,
    CandidateDetailsDTO,
    CandidateProfileDTO,
    CandidateSigninDTO,
    CandidateTableDTO,
    CandidateUpdateDTO,
)
from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.domain.entities.errors import AuthenticationError, DuplicateError, NotFoundError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.recruitment import Candidate
from labs.domain.entities.session import UserSession
from labs.domain.ports.password_hasher import IPasswordHasher
from labs.domain.repositories.organization import ICompanyRepository
from labs.domain.repositories.recruitment import ICandidateRepository
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class CandidateManagementUseCase(CompanyScopedUseCase):
    """Use case for managing candidates and their sign in."""

    def __init__(
        self,
        candidate_repository: ICandidateRepository,
        company_repository: ICompanyRepository,
        password_hasher: IPasswordHasher,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.candidate_repository = candidate_repository
        self.company_repository = company_repository
        self.password_hasher = password_hasher

    async def _ensure_email_available(
        self, email: str, current_candidate_id: Optional[UUID] = None
    ) -> None:
        existing = await self.candidate_repository.find_by_email(email)
        if existing is not None and existing.id != current_candidate_id:
            raise DuplicateError("Email already in use", details={"email": email})

    async def create(
        self, session: UserSession, company_id: UUID, payload: CandidateCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)

        email = payload.email.lower()
        await self._ensure_email_available(email)

        candidate = Candidate(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=email,
            password=self.password_hasher.hash(payload.password),
            university=payload.university,
            education_level=payload.education_level,
            address=payload.address,
            company_id=company_id,
        )
        await self.candidate_repository.create(candidate)
        logger.info(
            "Candidate created",
            candidate_id=str(candidate.id),
            company_id=str(company_id),
        )
        return CreatedDTO(id=candidate.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.candidate_repository,
            pagination,
            CandidateTableDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        candidates = await self.candidate_repository.find_all(company_id=company_id)
        return [
            ListItemDTO(id=c.id, name=f"{c.first_name} {c.last_name}")
            for c in candidates
        ]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.candidate_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, candidate_id: UUID
    ) -> CandidateDetailsDTO:
        await self._authorize(session, company_id)
        candidate = await self._get_in_company(
            self.candidate_repository, candidate_id, company_id, "Candidate"
        )
        company = await self.company_repository.find_by_id(company_id)
        return CandidateDetailsDTO.from_entity(
            candidate, company.name if company else None
        )

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        candidate_id: UUID,
        payload: CandidateUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        candidate = await self._get_in_company(
            self.candidate_repository, candidate_id, company_id, "Candidate"
        )

        changes = self._changes(payload)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
            await self._ensure_email_available(changes["email"], candidate.id)
        if "password" in changes:
            changes["password"] = self.password_hasher.hash(changes["password"])

        self._apply(candidate, changes)
        await self.candidate_repository.update(candidate)
        logger.info(
            "Candidate updated", candidate_id=str(candidate_id), fields=sorted(changes)
        )

    async def delete(
        self, session: UserSession, company_id: UUID, candidate_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.candidate_repository, candidate_id, company_id, "Candidate"
        )
        await self.candidate_repository.delete(candidate_id)
        logger.info("Candidate deleted", candidate_id=str(candidate_id))

    async def signin(self, payload: CandidateSigninDTO) -> CandidateProfileDTO:
        """
        Authenticate a candidate by email and password.

        Raises:
            NotFoundError: If no active candidate uses the email
            AuthenticationError: If the password does not match
        """
        email = payload.email.lower()
        candidate = await self.candidate_repository.find_one(email=email, status=True)
        if candidate is None:
            raise NotFoundError("Candidate")

        if not self.password_hasher.verify(payload.password, candidate.password):
            logger.warning("Candidate sign in rejected", candidate_id=str(candidate.id))
            raise AuthenticationError()

        logger.info("Candidate signed in", candidate_id=str(candidate.id))
        return CandidateProfileDTO(
            id=candidate.id,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            email=candidate.email,
            company_id=candidate.company_id,
        )
