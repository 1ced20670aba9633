"""Company endpoints."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from labs.application.dtos.common import CreatedDTO, PageDTO
from labs.application.dtos.company_dto import (
    CompanyCreateDTO,
    CompanyDTO,
    CompanyUpdateDTO,
)
from labs.application.use_cases.company_use_cases import CompanyManagementUseCase
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, created, success

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.post(
    "",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Create a company",
)
@inject
async def create_company(
    payload: CompanyCreateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: CompanyManagementUseCase = Depends(
        Provide[AppContainer.company_management_use_case]
    ),
) -> ApiResponse[CreatedDTO]:
    return created(await use_case.create(session, payload))


@router.get(
    "",
    response_model=ApiResponse[PageDTO[CompanyDTO]],
    summary="List companies",
    description="Only the company of the caller is visible.",
)
@inject
async def list_companies(
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: CompanyManagementUseCase = Depends(
        Provide[AppContainer.company_management_use_case]
    ),
) -> ApiResponse[PageDTO[CompanyDTO]]:
    return success(await use_case.list_page(session, pagination))


@router.get(
    "/{company_id}",
    response_model=ApiResponse[CompanyDTO],
    summary="Get company details",
)
@inject
async def get_company(
    company_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: CompanyManagementUseCase = Depends(
        Provide[AppContainer.company_management_use_case]
    ),
) -> ApiResponse[CompanyDTO]:
    return success(await use_case.get(session, company_id))


@router.put(
    "/{company_id}", response_model=ApiResponse[None], summary="Update a company"
)
@inject
async def update_company(
    company_id: UUID,
    payload: CompanyUpdateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: CompanyManagementUseCase = Depends(
        Provide[AppContainer.company_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.update(session, company_id, payload)
    return success()


@router.delete(
    "/{company_id}", response_model=ApiResponse[None], summary="Delete a company"
)
@inject
async def delete_company(
    company_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: CompanyManagementUseCase = Depends(
        Provide[AppContainer.company_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.delete(session, company_id)
    return success()
