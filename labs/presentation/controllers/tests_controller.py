"""
Test endpoints: generation for a candidate, answers and scores.

Static segments (``list``, ``count``, ``scores``, ``questions``) are declared
before the routes taking identifiers in the same position.
"""

from typing import List
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.test_dto import (
    CandidateAnswerDTO,
    TestAnswerDTO,
    TestDTO,
    TestQuestionViewDTO,
    TestScoreDTO,
)
from labs.application.use_cases.test_use_cases import TestManagementUseCase
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, created, success
from labs.shared.consts import DEFAULT_TEST_QUESTIONS

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.post(
    "/{company_id}/create/{candidate_id}",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Generate a test for a candidate",
    description="""
    Draw `nbrQuestions` distinct questions from the company question bank,
    restricted to the technologies of the candidate's latest project.
    Fails with 400 when the bank holds fewer matching questions.
    """,
)
@inject
async def generate_test(
    company_id: UUID,
    candidate_id: UUID,
    question_count: int = Query(
        DEFAULT_TEST_QUESTIONS,
        alias="nbrQuestions",
        ge=1,
        description="Number of questions of the test",
    ),
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[CreatedDTO]:
    return created(
        await use_case.generate(session, company_id, candidate_id, question_count)
    )


@router.get(
    "/{company_id}",
    response_model=ApiResponse[PageDTO[TestDTO]],
    summary="List tests page by page",
)
@inject
async def list_tests(
    company_id: UUID,
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[PageDTO[TestDTO]]:
    return success(await use_case.list_page(session, company_id, pagination))


@router.get(
    "/{company_id}/list",
    response_model=ApiResponse[List[ListItemDTO]],
    summary="List every test as id and title",
)
@inject
async def list_test_names(
    company_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[List[ListItemDTO]]:
    return success(await use_case.list_all(session, company_id))


@router.get(
    "/{company_id}/count",
    response_model=ApiResponse[CountDTO],
    summary="Count tests",
)
@inject
async def count_tests(
    company_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[CountDTO]:
    return success(await use_case.count(session, company_id))


@router.get(
    "/{company_id}/scores",
    response_model=ApiResponse[PageDTO[TestScoreDTO]],
    summary="List candidate scores page by page",
)
@inject
async def list_scores(
    company_id: UUID,
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[PageDTO[TestScoreDTO]]:
    return success(await use_case.list_scores(session, company_id, pagination))


@router.get(
    "/{company_id}/questions/{test_id}",
    response_model=ApiResponse[PageDTO[TestQuestionViewDTO]],
    summary="List the questions of a test without answers",
)
@inject
async def list_test_questions(
    company_id: UUID,
    test_id: UUID,
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[PageDTO[TestQuestionViewDTO]]:
    return success(
        await use_case.list_questions(session, company_id, test_id, pagination)
    )


@router.put(
    "/{company_id}/{candidate_id}/{test_id}/{question_id}",
    response_model=ApiResponse[None],
    summary="Record the answer of a candidate",
)
@inject
async def answer_question(
    company_id: UUID,
    candidate_id: UUID,
    test_id: UUID,
    question_id: UUID,
    payload: CandidateAnswerDTO,
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.answer(
        session, company_id, candidate_id, test_id, question_id, payload
    )
    return success()


@router.get(
    "/{company_id}/{candidate_id}/{test_id}",
    response_model=ApiResponse[PageDTO[TestAnswerDTO]],
    summary="List the answers of a candidate and refresh the score",
)
@inject
async def list_answers(
    company_id: UUID,
    candidate_id: UUID,
    test_id: UUID,
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[PageDTO[TestAnswerDTO]]:
    return success(
        await use_case.list_answers(
            session, company_id, candidate_id, test_id, pagination
        )
    )


@router.delete(
    "/{company_id}/{test_id}",
    response_model=ApiResponse[None],
    summary="Delete a test with its questions and candidate links",
)
@inject
async def delete_test(
    company_id: UUID,
    test_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: TestManagementUseCase = Depends(
        Provide[AppContainer.test_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.delete(session, company_id, test_id)
    return success()
