"""DTOs for the question bank."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, model_validator

from labs.domain.entities.recruitment import Question

from .common import APIModel


class QuestionCreateDTO(APIModel):
    question: str = Field(min_length=3)
    correct_answer: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    associated_technology: str = Field(min_length=1, max_length=60)

    @model_validator(mode="after")
    def _check_answer_in_options(self) -> "QuestionCreateDTO":
        if self.correct_answer not in self.options:
            raise ValueError("correct_answer must be one of the options")
        return self


class QuestionUpdateDTO(APIModel):
    question: Optional[str] = Field(default=None, min_length=3)
    correct_answer: Optional[str] = Field(default=None, min_length=1)
    options: Optional[List[str]] = Field(default=None, min_length=2)
    associated_technology: Optional[str] = Field(
        default=None, min_length=1, max_length=60
    )


class QuestionDTO(APIModel):
    id: UUID
    question: str
    correct_answer: str
    options: List[str]
    associated_technology: str
    created_at: datetime

    @classmethod
    def from_entity(cls, question: Question) -> "QuestionDTO":
        return cls(
            id=question.id,
            question=question.question,
            correct_answer=question.correct_answer,
            options=question.options,
            associated_technology=question.associated_technology,
            created_at=question.created_at,
        )
