"""Repository interfaces for candidates, interns, projects and questions."""

from abc import abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from labs.domain.entities.recruitment import (
    Candidate,
    Intern,
    Project,
    ProjectCandidate,
    Question,
)

from .base import IRepository


class ICandidateRepository(IRepository[Candidate]):
    """Interface for candidate repository."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Candidate]:
        """Find a candidate by email, case-insensitively."""
        pass


class IInternRepository(IRepository[Intern]):
    """Interface for intern repository."""


class IProjectRepository(IRepository[Project]):
    """Interface for project repository."""


class IProjectCandidateRepository(IRepository[ProjectCandidate]):
    """Interface for project assignment repository."""

    @abstractmethod
    async def find_latest_for_candidate(
        self, candidate_id: UUID, company_id: UUID
    ) -> Optional[ProjectCandidate]:
        """Return the most recent project assignment of a candidate."""
        pass


class IQuestionRepository(IRepository[Question]):
    """Interface for question bank repository."""

    @abstractmethod
    async def find_by_technologies(
        self, company_id: UUID, technologies: Sequence[str]
    ) -> List[Question]:
        """Return the company's questions tagged with any of the technologies."""
        pass
