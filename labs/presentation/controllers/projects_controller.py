"""Project endpoints and candidate assignment."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from labs.application.dtos.common import CreatedDTO
from labs.application.dtos.project_dto import (
    ProjectAssignDTO,
    ProjectCreateDTO,
    ProjectDTO,
    ProjectUpdateDTO,
)
from labs.application.use_cases.project_use_cases import ProjectManagementUseCase
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session
from labs.presentation.responses import ApiResponse, created

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post(
    "/{company_id}/assign/{candidate_id}",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Assign a candidate to a project",
    description="""
    Link the candidate to the project identified by `code`. Earlier
    assignments are kept; the latest one is used to generate tests.
    """,
)
@inject
async def assign_candidate(
    company_id: UUID,
    candidate_id: UUID,
    payload: ProjectAssignDTO,
    session: UserSession = Depends(get_current_session),
    use_case: ProjectManagementUseCase = Depends(
        Provide[AppContainer.project_management_use_case]
    ),
) -> ApiResponse[CreatedDTO]:
    return created(
        await use_case.assign_candidate(session, company_id, candidate_id, payload)
    )


add_company_crud_routes(
    router,
    provider=AppContainer.project_management_use_case,
    resource="project",
    create_dto=ProjectCreateDTO,
    update_dto=ProjectUpdateDTO,
    item_dto=ProjectDTO,
    details_dto=ProjectDTO,
)
