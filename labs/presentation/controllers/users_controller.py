"""Employee (user) endpoints of a company."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from labs.application.dtos.user_dto import (
    GenderDistributionDTO,
    UserCreateDTO,
    UserDetailsDTO,
    UserTableDTO,
    UserUpdateDTO,
)
from labs.application.use_cases.user_use_cases import UserManagementUseCase
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session
from labs.presentation.responses import ApiResponse, success

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "/{company_id}/gender",
    response_model=ApiResponse[GenderDistributionDTO],
    summary="Gender distribution of the employees",
    description="Male and female percentages rounded to integers; 0/0 without users.",
)
@inject
async def gender_distribution(
    company_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: UserManagementUseCase = Depends(
        Provide[AppContainer.user_management_use_case]
    ),
) -> ApiResponse[GenderDistributionDTO]:
    return success(await use_case.gender_distribution(session, company_id))


add_company_crud_routes(
    router,
    provider=AppContainer.user_management_use_case,
    resource="user",
    create_dto=UserCreateDTO,
    update_dto=UserUpdateDTO,
    item_dto=UserTableDTO,
    details_dto=UserDetailsDTO,
)
