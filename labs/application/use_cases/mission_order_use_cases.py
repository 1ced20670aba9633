"""Application Use Cases - Mission orders."""

from labs.application.dtos.workforce_dto import MissionOrderDTO
from labs.domain.entities.workforce import MissionOrder
from labs.domain.services.validation import ensure_period

from .base import EmployeeRecordUseCase


class MissionOrderManagementUseCase(EmployeeRecordUseCase[MissionOrder]):
    """Mission orders; the assigned employee is notified on creation."""

    resource_name = "Mission order"
    entity_class = MissionOrder
    dto_class = MissionOrderDTO

    def _validate(self, entity: MissionOrder) -> None:
        ensure_period(entity.start_date, entity.end_date, "mission period")

    async def _after_create(self, entity: MissionOrder) -> None:
        await self._notify(
            entity, "mission_order", f"New mission order: {entity.object}"
        )
