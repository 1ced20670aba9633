"""
Domain Entities - Assessment

Generated tests, the per-candidate question snapshots and scores.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from .base import Entity


@dataclass
class Test(Entity):
    """A test generated from a project's technologies."""

    __test__ = False

    title: str = ""
    specialty: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    company_id: Optional[UUID] = None


@dataclass
class TestQuestion(Entity):
    """Snapshot of a bank question inside a test, with the candidate's answer."""

    __test__ = False

    test_id: Optional[UUID] = None
    question_id: Optional[UUID] = None
    question: str = ""
    correct_answer: str = ""
    options: List[str] = field(default_factory=list)
    associated_technology: str = ""
    candidate_id: Optional[UUID] = None
    candidate_answer: Optional[str] = None
    company_id: Optional[UUID] = None

    @property
    def is_correct(self) -> bool:
        return (
            self.candidate_answer is not None
            and self.candidate_answer == self.correct_answer
        )


@dataclass
class TestCandidate(Entity):
    """Link between a test and the candidate taking it."""

    __test__ = False

    test_id: Optional[UUID] = None
    candidate_id: Optional[UUID] = None
    score: int = 0
    company_id: Optional[UUID] = None
