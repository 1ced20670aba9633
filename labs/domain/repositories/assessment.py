"""Repository interfaces for tests, test questions and test candidates."""

from labs.domain.entities.assessment import Test, TestCandidate, TestQuestion

from .base import IRepository


class ITestRepository(IRepository[Test]):
    """Interface for test repository."""


class ITestQuestionRepository(IRepository[TestQuestion]):
    """Interface for test question snapshot repository."""


class ITestCandidateRepository(IRepository[TestCandidate]):
    """Interface for test candidate repository."""
