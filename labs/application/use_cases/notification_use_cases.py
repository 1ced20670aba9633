"""
Application Use Cases - Notifications

Notifications are private: only the addressed employee can read, mark or
delete them, so every operation runs the session guard instead of the
company guard.
"""

from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, PageDTO
from labs.application.dtos.workforce_dto import (
    NotificationDTO,
    NotificationUpdateDTO,
)
from labs.domain.entities.errors import NotFoundError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.entities.workforce import Notification
from labs.domain.repositories.workforce import INotificationRepository
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class NotificationManagementUseCase(CompanyScopedUseCase):
    def __init__(
        self,
        notification_repository: INotificationRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.notification_repository = notification_repository

    async def _load(self, user_id: UUID, notification_id: UUID) -> Notification:
        notification = await self.notification_repository.find_one(
            id=notification_id, user_id=user_id
        )
        if notification is None:
            raise NotFoundError("Notification", notification_id)
        return notification

    async def list_page(
        self, session: UserSession, user_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self.tenancy_guard.check_employee_session(user_id, session)
        return await self._paginate(
            self.notification_repository,
            pagination,
            NotificationDTO.from_entity,
            user_id=user_id,
        )

    async def count(self, session: UserSession, user_id: UUID) -> CountDTO:
        await self.tenancy_guard.check_employee_session(user_id, session)
        total = await self.notification_repository.count(user_id=user_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, user_id: UUID, notification_id: UUID
    ) -> NotificationDTO:
        await self.tenancy_guard.check_employee_session(user_id, session)
        return NotificationDTO.from_entity(await self._load(user_id, notification_id))

    async def update(
        self,
        session: UserSession,
        user_id: UUID,
        notification_id: UUID,
        payload: NotificationUpdateDTO,
    ) -> None:
        await self.tenancy_guard.check_employee_session(user_id, session)
        notification = await self._load(user_id, notification_id)
        notification.seen = payload.seen
        await self.notification_repository.update(notification)
        logger.info(
            "Notification updated",
            notification_id=str(notification_id),
            seen=payload.seen,
        )

    async def delete(
        self, session: UserSession, user_id: UUID, notification_id: UUID
    ) -> None:
        await self.tenancy_guard.check_employee_session(user_id, session)
        await self._load(user_id, notification_id)
        await self.notification_repository.delete(notification_id)
        logger.info("Notification deleted", notification_id=str(notification_id))
