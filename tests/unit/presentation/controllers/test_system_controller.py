from __future__ import annotations

import pytest
from fastapi import HTTPException, Response

from labs.application.use_cases.health_use_cases import GetHealthStatusUseCase
from labs.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from labs.presentation.controllers.system_controller import health


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth.from_dependencies(
            [DependencyStatus(name="mongo", status=status)]
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


class _BrokenHealthService:
    async def evaluate(self) -> SystemHealth:
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        ),
    )

    assert dto.status is ServiceStatus.UP
    assert dto.dependencies[0].name == "mongo"
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_endpoint_down_is_503():
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DOWN)
        ),
    )

    assert dto.status is ServiceStatus.DOWN
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_health_endpoint_failure_is_unavailable():
    with pytest.raises(HTTPException) as exc_info:
        await health(
            response=Response(),
            get_health_status_use_case=GetHealthStatusUseCase(_BrokenHealthService()),
        )

    assert exc_info.value.status_code == 503
