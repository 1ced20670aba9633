"""MongoDB repositories for generated tests."""

from labs.domain.entities.assessment import Test, TestCandidate, TestQuestion
from labs.domain.repositories.assessment import (
    ITestCandidateRepository,
    ITestQuestionRepository,
    ITestRepository,
)

from .base_repository import MongoRepository


class TestRepository(MongoRepository[Test], ITestRepository):
    __test__ = False

    COLLECTION_NAME = "tests"
    RESOURCE_NAME = "Test"
    ENTITY_CLASS = Test


class TestQuestionRepository(MongoRepository[TestQuestion], ITestQuestionRepository):
    __test__ = False

    COLLECTION_NAME = "test_questions"
    RESOURCE_NAME = "Test question"
    ENTITY_CLASS = TestQuestion


class TestCandidateRepository(
    MongoRepository[TestCandidate], ITestCandidateRepository
):
    __test__ = False

    COLLECTION_NAME = "test_condidats"
    RESOURCE_NAME = "Test candidate"
    ENTITY_CLASS = TestCandidate
