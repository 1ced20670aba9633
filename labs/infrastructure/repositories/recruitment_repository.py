"""
MongoDB Recruitment Repositories - Infrastructure Layer

Candidates, interns, projects (with their candidate assignments) and the
question bank.
"""

from typing import List, Optional, Sequence
from uuid import UUID

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from labs.domain.entities.recruitment import (
    Candidate,
    Intern,
    Project,
    ProjectCandidate,
    Question,
)
from labs.domain.repositories.recruitment import (
    ICandidateRepository,
    IInternRepository,
    IProjectCandidateRepository,
    IProjectRepository,
    IQuestionRepository,
)

from .base_repository import MongoRepository


class CandidateRepository(MongoRepository[Candidate], ICandidateRepository):
    COLLECTION_NAME = "condidats"
    RESOURCE_NAME = "Candidate"
    ENTITY_CLASS = Candidate

    async def find_by_email(self, email: str) -> Optional[Candidate]:
        return await self.find_one(email=email.strip().lower())


class InternRepository(MongoRepository[Intern], IInternRepository):
    COLLECTION_NAME = "interns"
    RESOURCE_NAME = "Intern"
    ENTITY_CLASS = Intern


class ProjectRepository(MongoRepository[Project], IProjectRepository):
    COLLECTION_NAME = "projects"
    RESOURCE_NAME = "Project"
    ENTITY_CLASS = Project


class ProjectCandidateRepository(
    MongoRepository[ProjectCandidate], IProjectCandidateRepository
):
    COLLECTION_NAME = "projects_condidats"
    RESOURCE_NAME = "Project assignment"
    ENTITY_CLASS = ProjectCandidate

    async def find_latest_for_candidate(
        self, candidate_id: UUID, company_id: UUID
    ) -> Optional[ProjectCandidate]:
        query = self._query(candidate_id=candidate_id, company_id=company_id)
        try:
            documents = list(
                self.collection.find(query).sort("created_at", DESCENDING).limit(1)
            )
        except PyMongoError as e:
            raise self._failure("read", e, candidate_id=str(candidate_id)) from e
        return self._to_entity(documents[0]) if documents else None


class QuestionRepository(MongoRepository[Question], IQuestionRepository):
    COLLECTION_NAME = "questions"
    RESOURCE_NAME = "Question"
    ENTITY_CLASS = Question

    async def find_by_technologies(
        self, company_id: UUID, technologies: Sequence[str]
    ) -> List[Question]:
        if not technologies:
            return []
        return await self.find_all(
            company_id=company_id,
            associated_technology={"$in": list(technologies)},
        )
