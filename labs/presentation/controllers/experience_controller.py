"""Professional experience endpoints."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from labs.application.dtos.common import CreatedDTO
from labs.application.dtos.workforce_dto import (
    UserExperienceCreateDTO,
    UserExperienceDTO,
    UserExperienceUpdateDTO,
)
from labs.application.use_cases.experience_use_cases import (
    UserExperienceManagementUseCase,
)
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session
from labs.presentation.responses import ApiResponse, created

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/experience", tags=["experience"])


@router.post(
    "/{company_id}/create/{user_id}",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Add an experience entry to an employee",
)
@inject
async def create_experience(
    company_id: UUID,
    user_id: UUID,
    payload: UserExperienceCreateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: UserExperienceManagementUseCase = Depends(
        Provide[AppContainer.user_experience_management_use_case]
    ),
) -> ApiResponse[CreatedDTO]:
    return created(await use_case.create(session, company_id, user_id, payload))


add_company_crud_routes(
    router,
    provider=AppContainer.user_experience_management_use_case,
    resource="user experience",
    create_dto=UserExperienceCreateDTO,
    update_dto=UserExperienceUpdateDTO,
    item_dto=UserExperienceDTO,
    details_dto=UserExperienceDTO,
    with_create=False,
)
