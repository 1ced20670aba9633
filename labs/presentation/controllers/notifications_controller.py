"""Notification endpoints; an employee only reaches their own notifications."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from labs.application.dtos.common import CountDTO, PageDTO
from labs.application.dtos.workforce_dto import NotificationDTO, NotificationUpdateDTO
from labs.application.use_cases.notification_use_cases import (
    NotificationManagementUseCase,
)
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.main.container import AppContainer
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, success

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get(
    "/{user_id}",
    response_model=ApiResponse[PageDTO[NotificationDTO]],
    summary="List notifications page by page",
)
@inject
async def list_notifications(
    user_id: UUID,
    pagination: Pagination = Depends(get_pagination),
    session: UserSession = Depends(get_current_session),
    use_case: NotificationManagementUseCase = Depends(
        Provide[AppContainer.notification_management_use_case]
    ),
) -> ApiResponse[PageDTO[NotificationDTO]]:
    return success(await use_case.list_page(session, user_id, pagination))


@router.get(
    "/{user_id}/count",
    response_model=ApiResponse[CountDTO],
    summary="Count notifications",
)
@inject
async def count_notifications(
    user_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: NotificationManagementUseCase = Depends(
        Provide[AppContainer.notification_management_use_case]
    ),
) -> ApiResponse[CountDTO]:
    return success(await use_case.count(session, user_id))


@router.get(
    "/{user_id}/{notification_id}",
    response_model=ApiResponse[NotificationDTO],
    summary="Get a notification",
)
@inject
async def get_notification(
    user_id: UUID,
    notification_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: NotificationManagementUseCase = Depends(
        Provide[AppContainer.notification_management_use_case]
    ),
) -> ApiResponse[NotificationDTO]:
    return success(await use_case.get(session, user_id, notification_id))


@router.put(
    "/{user_id}/{notification_id}",
    response_model=ApiResponse[None],
    summary="Mark a notification as seen or unseen",
)
@inject
async def update_notification(
    user_id: UUID,
    notification_id: UUID,
    payload: NotificationUpdateDTO,
    session: UserSession = Depends(get_current_session),
    use_case: NotificationManagementUseCase = Depends(
        Provide[AppContainer.notification_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.update(session, user_id, notification_id, payload)
    return success()


@router.delete(
    "/{user_id}/{notification_id}",
    response_model=ApiResponse[None],
    summary="Delete a notification",
)
@inject
async def delete_notification(
    user_id: UUID,
    notification_id: UUID,
    session: UserSession = Depends(get_current_session),
    use_case: NotificationManagementUseCase = Depends(
        Provide[AppContainer.notification_management_use_case]
    ),
) -> ApiResponse[None]:
    await use_case.delete(session, user_id, notification_id)
    return success()
