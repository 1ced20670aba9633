"""DTOs for generated tests, answers and scores."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from labs.domain.entities.assessment import Test, TestQuestion

from .common import APIModel


class TestDTO(APIModel):
    __test__ = False

    id: UUID
    title: str
    specialty: Optional[str] = None
    technologies: List[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, test: Test) -> "TestDTO":
        return cls(
            id=test.id,
            title=test.title,
            specialty=test.specialty,
            technologies=test.technologies,
            created_at=test.created_at,
        )


class TestQuestionViewDTO(APIModel):
    """A test question as shown to the candidate (no answer)."""

    __test__ = False

    question_id: UUID
    question: str
    options: List[str]

    @classmethod
    def from_entity(cls, item: TestQuestion) -> "TestQuestionViewDTO":
        return cls(
            question_id=item.question_id, question=item.question, options=item.options
        )


class CandidateAnswerDTO(APIModel):
    candidate_answer: str = Field(min_length=1)


class TestAnswerDTO(APIModel):
    __test__ = False

    question_id: UUID
    question: str
    correct_answer: str
    candidate_answer: Optional[str] = None

    @classmethod
    def from_entity(cls, item: TestQuestion) -> "TestAnswerDTO":
        return cls(
            question_id=item.question_id,
            question=item.question,
            correct_answer=item.correct_answer,
            candidate_answer=item.candidate_answer,
        )


class TestScoreDTO(APIModel):
    __test__ = False

    test_id: UUID
    candidate_id: UUID
    title: str
    first_name: str
    last_name: str
    score: int
