"""
Application Use Cases - Projects

Projects carry the technologies tests are generated from. Candidates are
assigned to a project by its code; the latest assignment is the one used
when a test is generated.
"""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.project_dto import (
    ProjectAssignDTO,
    ProjectCreateDTO,
    ProjectDTO,
    ProjectUpdateDTO,
)
from labs.domain.entities.errors import DuplicateError, NotFoundError, ValidationError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.recruitment import Project, ProjectCandidate
from labs.domain.entities.session import UserSession
from labs.domain.repositories.recruitment import (
    ICandidateRepository,
    IProjectCandidateRepository,
    IProjectRepository,
)
from labs.domain.services.question_sampler import normalize_technologies
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)

# DTO field -> entity field
_RENAMED_FIELDS = {"project_name": "name", "exp_date": "expires_at"}


class ProjectManagementUseCase(CompanyScopedUseCase):
    """Use case for projects and candidate assignment."""

    def __init__(
        self,
        project_repository: IProjectRepository,
        project_candidate_repository: IProjectCandidateRepository,
        candidate_repository: ICandidateRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.project_repository = project_repository
        self.project_candidate_repository = project_candidate_repository
        self.candidate_repository = candidate_repository

    @staticmethod
    def _technologies(values: List[str]) -> List[str]:
        technologies = normalize_technologies(values)
        if not technologies:
            raise ValidationError("A project needs at least one technology")
        return technologies

    async def _ensure_code_available(
        self, company_id: UUID, code: str, current_project_id: Optional[UUID] = None
    ) -> None:
        existing = await self.project_repository.find_one(
            company_id=company_id, code=code
        )
        if existing is not None and existing.id != current_project_id:
            raise DuplicateError("Project code already in use", details={"code": code})

    async def create(
        self, session: UserSession, company_id: UUID, payload: ProjectCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self._ensure_code_available(company_id, payload.code)

        project = Project(
            name=payload.project_name,
            code=payload.code,
            description=payload.description,
            specialty=payload.specialty,
            technologies=self._technologies(payload.technologies),
            expires_at=payload.exp_date,
            company_id=company_id,
        )
        await self.project_repository.create(project)
        logger.info(
            "Project created",
            project_id=str(project.id),
            code=project.code,
            company_id=str(company_id),
        )
        return CreatedDTO(id=project.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.project_repository,
            pagination,
            ProjectDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        projects = await self.project_repository.find_all(company_id=company_id)
        return [ListItemDTO(id=project.id, name=project.name) for project in projects]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.project_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, project_id: UUID
    ) -> ProjectDTO:
        await self._authorize(session, company_id)
        project = await self._get_in_company(
            self.project_repository, project_id, company_id, "Project"
        )
        return ProjectDTO.from_entity(project)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        project_id: UUID,
        payload: ProjectUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        project = await self._get_in_company(
            self.project_repository, project_id, company_id, "Project"
        )

        changes = {
            _RENAMED_FIELDS.get(name, name): value
            for name, value in self._changes(payload).items()
        }
        if "code" in changes:
            await self._ensure_code_available(company_id, changes["code"], project.id)
        if "technologies" in changes:
            changes["technologies"] = self._technologies(changes["technologies"])

        self._apply(project, changes)
        await self.project_repository.update(project)
        logger.info(
            "Project updated", project_id=str(project_id), fields=sorted(changes)
        )

    async def delete(
        self, session: UserSession, company_id: UUID, project_id: UUID
    ) -> None:
        """Delete a project and its candidate assignments."""
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.project_repository, project_id, company_id, "Project"
        )
        removed = await self.project_candidate_repository.delete_many(
            company_id=company_id, project_id=project_id
        )
        await self.project_repository.delete(project_id)
        logger.info(
            "Project deleted", project_id=str(project_id), assignments_removed=removed
        )

    async def assign_candidate(
        self,
        session: UserSession,
        company_id: UUID,
        candidate_id: UUID,
        payload: ProjectAssignDTO,
    ) -> CreatedDTO:
        """
        Assign a candidate to the project identified by ``payload.code``.

        Raises:
            NotFoundError: If the candidate or the project code is unknown in
                the company
        """
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.candidate_repository, candidate_id, company_id, "Candidate"
        )
        project = await self.project_repository.find_one(
            company_id=company_id, code=payload.code
        )
        if project is None:
            raise NotFoundError("Project", details={"code": payload.code})

        assignment = ProjectCandidate(
            project_id=project.id, candidate_id=candidate_id, company_id=company_id
        )
        await self.project_candidate_repository.create(assignment)
        logger.info(
            "Candidate assigned to project",
            candidate_id=str(candidate_id),
            project_id=str(project.id),
        )
        return CreatedDTO(id=assignment.id)
