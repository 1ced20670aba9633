"""Health report for `GET /health`."""

from labs.application.dtos.health_dto import SystemHealthDTO
from labs.domain.ports.health_check import IHealthCheckService
from labs.shared import get_logger

logger = get_logger(__name__)


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        if not system_health.is_available:
            failed = [d.name for d in system_health.dependencies if d.error]
            logger.warning("health.dependencies.failed", dependencies=failed)
        return SystemHealthDTO.from_domain(system_health)
