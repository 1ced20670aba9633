from __future__ import annotations

import random
from typing import cast
from uuid import uuid4

import pytest

from labs.application.dtos.test_dto import CandidateAnswerDTO
from labs.application.use_cases.test_use_cases import TestManagementUseCase
from labs.domain.entities.errors import NotFoundError, ValidationError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.recruitment import (
    Candidate,
    Project,
    ProjectCandidate,
    Question,
)
from labs.infrastructure.database.mongo_database import MongoDatabase
from labs.infrastructure.repositories import (
    CandidateRepository,
    ProjectCandidateRepository,
    ProjectRepository,
    QuestionRepository,
    TestCandidateRepository,
    TestQuestionRepository,
    TestRepository,
)
from tests.conftest import store


@pytest.fixture()
def tests_use_case(fake_mongo_database, tenancy_guard) -> TestManagementUseCase:
    database = cast(MongoDatabase, fake_mongo_database)
    return TestManagementUseCase(
        test_repository=TestRepository(database),
        test_question_repository=TestQuestionRepository(database),
        test_candidate_repository=TestCandidateRepository(database),
        candidate_repository=CandidateRepository(database),
        project_repository=ProjectRepository(database),
        project_candidate_repository=ProjectCandidateRepository(database),
        question_repository=QuestionRepository(database),
        tenancy_guard=tenancy_guard,
        rng=random.Random(1234),
    )


@pytest.fixture()
def recruitment(organization, fake_mongo_database):
    """A candidate assigned to a python/mongodb project and a question bank."""
    company_id = organization.company.id
    candidate = store(
        fake_mongo_database,
        CandidateRepository,
        Candidate(
            first_name="Salma",
            last_name="Gharbi",
            email="salma@example.com",
            company_id=company_id,
        ),
    )
    project = store(
        fake_mongo_database,
        ProjectRepository,
        Project(
            name="Billing API",
            code="PRJ-API",
            technologies=["python", "mongodb"],
            specialty="backend",
            company_id=company_id,
        ),
    )
    store(
        fake_mongo_database,
        ProjectCandidateRepository,
        ProjectCandidate(
            project_id=project.id, candidate_id=candidate.id, company_id=company_id
        ),
    )
    for index in range(12):
        technology = ("python", "mongodb", "java")[index % 3]
        store(
            fake_mongo_database,
            QuestionRepository,
            Question(
                question=f"{technology} question {index}",
                correct_answer=f"right {index}",
                options=[f"right {index}", f"wrong {index}"],
                associated_technology=technology,
                company_id=company_id,
            ),
        )
    return candidate, project


@pytest.mark.asyncio
async def test_generate_draws_distinct_questions_from_project_technologies(
    organization, recruitment, tests_use_case
) -> None:
    candidate, project = recruitment
    company_id = organization.company.id

    created = await tests_use_case.generate(
        organization.session, company_id, candidate.id, question_count=6
    )

    test = await tests_use_case.test_repository.find_by_id(created.id)
    assert test is not None
    assert test.title == "Billing API Test"
    assert test.technologies == ["python", "mongodb"]

    snapshots = await tests_use_case.test_question_repository.find_all(
        test_id=created.id
    )
    assert len(snapshots) == 6
    assert len({item.question_id for item in snapshots}) == 6
    assert all(
        item.associated_technology in {"python", "mongodb"} for item in snapshots
    )
    assert all(item.candidate_id == candidate.id for item in snapshots)

    link = await tests_use_case.test_candidate_repository.find_one(test_id=created.id)
    assert link is not None
    assert link.candidate_id == candidate.id
    assert link.score == 0


@pytest.mark.asyncio
async def test_generate_rejects_pool_smaller_than_requested(
    organization, recruitment, tests_use_case
) -> None:
    candidate, _ = recruitment

    # 8 questions match python/mongodb
    with pytest.raises(ValidationError):
        await tests_use_case.generate(
            organization.session, organization.company.id, candidate.id, 9
        )

    assert await tests_use_case.test_repository.count() == 0


@pytest.mark.asyncio
async def test_generate_requires_project_assignment(
    organization, fake_mongo_database, tests_use_case
) -> None:
    candidate = store(
        fake_mongo_database,
        CandidateRepository,
        Candidate(first_name="Nour", company_id=organization.company.id),
    )

    with pytest.raises(NotFoundError, match="Project"):
        await tests_use_case.generate(
            organization.session, organization.company.id, candidate.id
        )

    with pytest.raises(NotFoundError, match="Candidate"):
        await tests_use_case.generate(
            organization.session, organization.company.id, uuid4()
        )


@pytest.mark.asyncio
async def test_answers_update_the_score(
    organization, recruitment, tests_use_case
) -> None:
    candidate, _ = recruitment
    company_id = organization.company.id
    created = await tests_use_case.generate(
        organization.session, company_id, candidate.id, question_count=4
    )
    snapshots = await tests_use_case.test_question_repository.find_all(
        test_id=created.id
    )

    for index, item in enumerate(snapshots):
        answer = item.correct_answer if index < 3 else "nope"
        await tests_use_case.answer(
            organization.session,
            company_id,
            candidate.id,
            created.id,
            item.question_id,
            CandidateAnswerDTO(candidate_answer=answer),
        )

    page = await tests_use_case.list_answers(
        organization.session,
        company_id,
        candidate.id,
        created.id,
        Pagination.create(1, 5),
    )
    assert page.total_count == 4
    assert all(item.candidate_answer is not None for item in page.items)

    scores = await tests_use_case.list_scores(
        organization.session, company_id, Pagination()
    )
    assert scores.total_count == 1
    score = scores.items[0]
    assert score.score == 3
    assert score.title == "Billing API Test"
    assert (score.first_name, score.last_name) == ("Salma", "Gharbi")


@pytest.mark.asyncio
async def test_answer_unknown_question_is_not_found(
    organization, recruitment, tests_use_case
) -> None:
    candidate, _ = recruitment
    created = await tests_use_case.generate(
        organization.session, organization.company.id, candidate.id, 2
    )

    with pytest.raises(NotFoundError):
        await tests_use_case.answer(
            organization.session,
            organization.company.id,
            candidate.id,
            created.id,
            uuid4(),
            CandidateAnswerDTO(candidate_answer="anything"),
        )


@pytest.mark.asyncio
async def test_list_questions_hides_answers(
    organization, recruitment, tests_use_case
) -> None:
    candidate, _ = recruitment
    created = await tests_use_case.generate(
        organization.session, organization.company.id, candidate.id, 3
    )

    page = await tests_use_case.list_questions(
        organization.session, organization.company.id, created.id, Pagination()
    )

    assert page.total_count == 3
    dumped = page.items[0].model_dump(by_alias=True)
    assert set(dumped) == {"questionId", "question", "options"}


@pytest.mark.asyncio
async def test_delete_test_cascades(organization, recruitment, tests_use_case) -> None:
    candidate, _ = recruitment
    company_id = organization.company.id
    created = await tests_use_case.generate(
        organization.session, company_id, candidate.id, 3
    )

    await tests_use_case.delete(organization.session, company_id, created.id)

    assert (await tests_use_case.count(organization.session, company_id)).count == 0
    assert await tests_use_case.test_question_repository.count(test_id=created.id) == 0
    assert await tests_use_case.test_candidate_repository.count(test_id=created.id) == 0
