"""
Application Service - Notifier

Creates the in-app notifications shown to employees when something about
them changes (a decision on one of their requests, a new mission order).
"""

from uuid import UUID

import structlog

from labs.domain.entities.workforce import Notification
from labs.domain.repositories.workforce import INotificationRepository

logger = structlog.get_logger(__name__)


class Notifier:
    def __init__(self, notification_repository: INotificationRepository):
        self.notification_repository = notification_repository

    async def notify(
        self, user_id: UUID, company_id: UUID, type: str, content: str
    ) -> Notification:
        notification = await self.notification_repository.create(
            Notification(
                type=type, content=content, user_id=user_id, company_id=company_id
            )
        )
        logger.info(
            "notification.created",
            notification_id=str(notification.id),
            user_id=str(user_id),
            type=type,
        )
        return notification
