"""Application Use Cases - Question bank."""

from typing import List
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.question_dto import (
    QuestionCreateDTO,
    QuestionDTO,
    QuestionUpdateDTO,
)
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.recruitment import Question
from labs.domain.entities.session import UserSession
from labs.domain.repositories.recruitment import IQuestionRepository
from labs.domain.services.tenancy_guard import TenancyGuard
from labs.domain.services.validation import ensure_answer_in_options

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class QuestionManagementUseCase(CompanyScopedUseCase):
    """Multiple-choice questions tagged with a technology."""

    def __init__(
        self, question_repository: IQuestionRepository, tenancy_guard: TenancyGuard
    ):
        super().__init__(tenancy_guard)
        self.question_repository = question_repository

    async def create(
        self, session: UserSession, company_id: UUID, payload: QuestionCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        ensure_answer_in_options(payload.correct_answer, payload.options)

        question = Question(
            question=payload.question,
            correct_answer=payload.correct_answer,
            options=list(payload.options),
            associated_technology=payload.associated_technology.strip(),
            company_id=company_id,
        )
        await self.question_repository.create(question)
        logger.info(
            "Question created",
            question_id=str(question.id),
            technology=question.associated_technology,
        )
        return CreatedDTO(id=question.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.question_repository,
            pagination,
            QuestionDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        questions = await self.question_repository.find_all(company_id=company_id)
        return [ListItemDTO(id=item.id, name=item.question) for item in questions]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.question_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, question_id: UUID
    ) -> QuestionDTO:
        await self._authorize(session, company_id)
        question = await self._get_in_company(
            self.question_repository, question_id, company_id, "Question"
        )
        return QuestionDTO.from_entity(question)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        question_id: UUID,
        payload: QuestionUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        question = await self._get_in_company(
            self.question_repository, question_id, company_id, "Question"
        )

        changes = self._changes(payload)
        self._apply(question, changes)
        ensure_answer_in_options(question.correct_answer, question.options)
        await self.question_repository.update(question)
        logger.info(
            "Question updated", question_id=str(question_id), fields=sorted(changes)
        )

    async def delete(
        self, session: UserSession, company_id: UUID, question_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.question_repository, question_id, company_id, "Question"
        )
        await self.question_repository.delete(question_id)
        logger.info("Question deleted", question_id=str(question_id))
