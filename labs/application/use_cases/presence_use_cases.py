"""Application Use Cases - Presences (badge checks)."""

from labs.application.dtos.workforce_dto import PresenceDTO
from labs.domain.entities.workforce import Presence

from .base import EmployeeRecordUseCase


class PresenceManagementUseCase(EmployeeRecordUseCase[Presence]):
    resource_name = "Presence"
    entity_class = Presence
    dto_class = PresenceDTO
