"""Permission endpoints: grants of CRUD bits to a role on a feature."""

from typing import Optional
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status

from labs.application.dtos.common import CountDTO, CreatedDTO, PageDTO
from labs.application.dtos.permission_dto import (
    PermissionCheckDTO,
    PermissionCreateDTO,
    PermissionDTO,
    PermissionUpdateDTO,
)
from labs.application.use_cases.permission_use_cases import (
    PermissionManagementUseCase,
)
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, created, success

router = APIRouter(prefix="/api/permissions", tags=["permissions"])


@router.post(
    "/{company_id}/{role_id}/{feature_id}",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Grant permissions to a role on a feature",
)
@inject
async def create_permission(
    company_id: UUID,
    role_id: UUID,
    feature_id: UUID,
    payload: PermissionCreateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[CreatedDTO]:
    return created(
        await use_case.create(session, company_id, role_id, feature_id, payload)
    )


@router.get(
    "/{company_id}",
    response_model=ApiResponse[PageDTO[PermissionDTO]],
    summary="List permissions page by page",
)
@inject
async def list_permissions(
    company_id: UUID,
    role_id: Optional[UUID] = Query(
        None, alias="roleID", description="Only permissions of this role"
    ),
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[PageDTO[PermissionDTO]]:
    return success(
        await use_case.list_page(session, company_id, pagination, role_id)
    )


@router.get(
    "/{company_id}/count",
    response_model=ApiResponse[CountDTO],
    summary="Count permissions",
)
@inject
async def count_permissions(
    company_id: UUID,
    role_id: Optional[UUID] = Query(
        None, alias="roleID", description="Only permissions of this role"
    ),
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[CountDTO]:
    return success(await use_case.count(session, company_id, role_id))


@router.get(
    "/{company_id}/check/{role_id}/{feature_id}",
    response_model=ApiResponse[PermissionCheckDTO],
    summary="Check whether a role may perform an action on a feature",
)
@inject
async def check_permission(
    company_id: UUID,
    role_id: UUID,
    feature_id: UUID,
    action: str = Query(..., description="create, read, update or delete"),
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[PermissionCheckDTO]:
    return success(
        await use_case.check(session, company_id, role_id, feature_id, action)
    )


@router.get(
    "/{company_id}/{permission_id}",
    response_model=ApiResponse[PermissionDTO],
    summary="Get a permission",
)
@inject
async def get_permission(
    company_id: UUID,
    permission_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[PermissionDTO]:
    return success(await use_case.get(session, company_id, permission_id))


@router.put(
    "/{company_id}/{permission_id}",
    response_model=ApiResponse[None],
    summary="Update the bits of a permission",
)
@inject
async def update_permission(
    company_id: UUID,
    permission_id: UUID,
    payload: PermissionUpdateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.update(session, company_id, permission_id, payload)
    return success()


@router.delete(
    "/{company_id}/{permission_id}",
    response_model=ApiResponse[None],
    summary="Delete a permission",
)
@inject
async def delete_permission(
    company_id: UUID,
    permission_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: PermissionManagementUseCase = Depends(
        Provide[AppContainer.permission_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.delete(session, company_id, permission_id)
    return success()
