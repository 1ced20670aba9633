"""Intern endpoints."""

from typing import Optional
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from labs.application.dtos.common import PageDTO
from labs.application.dtos.intern_dto import (
    InternCreateDTO,
    InternDetailsDTO,
    InternTableDTO,
    InternUpdateDTO,
)
from labs.application.use_cases.intern_use_cases import InternManagementUseCase
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, success

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/interns", tags=["interns"])


@router.get(
    "/{company_id}",
    response_model=ApiResponse[PageDTO[InternTableDTO]],
    summary="List interns page by page",
)
@inject
async def list_interns(
    company_id: UUID,
    supervisor_id: Optional[UUID] = Query(
        None, alias="supervisorID", description="Only interns of this supervisor"
    ),
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: InternManagementUseCase = Depends(
        Provide[AppContainer.intern_management_use_case]
    ),
) -> ApiResponse[PageDTO[InternTableDTO]]:
    return success(
        await use_case.list_page(session, company_id, pagination, supervisor_id)
    )


add_company_crud_routes(
    router,
    provider=AppContainer.intern_management_use_case,
    resource="intern",
    create_dto=InternCreateDTO,
    update_dto=InternUpdateDTO,
    item_dto=InternTableDTO,
    details_dto=InternDetailsDTO,
    with_page=False,
)
