"""Application Use Cases - Training requests."""

from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel

from labs.application.dtos.workforce_dto import TrainingRequestDTO
from labs.domain.entities.base import utc_now
from labs.domain.entities.workforce import TrainingRequest

from .base import EmployeeRecordUseCase


class TrainingRequestManagementUseCase(EmployeeRecordUseCase[TrainingRequest]):
    """
    Training requests filed by employees.

    The company answers through an update carrying ``decision_company``; the
    requesting employee is notified of the decision.
    """

    resource_name = "Training request"
    entity_class = TrainingRequest
    dto_class = TrainingRequestDTO

    def _build(
        self, payload: BaseModel, company_id: UUID, user_id: UUID
    ) -> TrainingRequest:
        request = super()._build(payload, company_id, user_id)
        if request.request_date is None:
            request.request_date = utc_now()
        return request

    async def _after_update(
        self, entity: TrainingRequest, changes: Dict[str, Any]
    ) -> None:
        if "decision_company" in changes:
            await self._notify(
                entity,
                "training_request",
                f"Decision on your training request '{entity.training_title}': "
                f"{entity.decision_company}",
            )
