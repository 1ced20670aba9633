from __future__ import annotations

from typing import cast

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from labs.domain.entities.health import ServiceStatus
from labs.infrastructure.database.mongo_database import MongoDatabase
from labs.infrastructure.services.health_check_service import HealthCheckService
from tests.conftest import FakeMongoDatabase


@pytest.mark.asyncio
async def test_mongo_up(fake_mongo_database: FakeMongoDatabase) -> None:
    service = HealthCheckService(cast(MongoDatabase, fake_mongo_database))

    health = await service.evaluate()

    assert health.status is ServiceStatus.UP
    mongo = health.dependencies[0]
    assert mongo.name == "mongo"
    assert mongo.error is None
    assert mongo.details == {"database": "labs_test"}
    assert mongo.latency_ms is not None


@pytest.mark.asyncio
async def test_mongo_down_reports_error(fake_mongo_database: FakeMongoDatabase) -> None:
    fake_mongo_database.ping_error = ServerSelectionTimeoutError("timed out")
    service = HealthCheckService(cast(MongoDatabase, fake_mongo_database))

    health = await service.evaluate()

    assert health.status is ServiceStatus.DOWN
    assert not health.is_available
    assert health.dependencies[0].error == "timed out"
    assert health.dependencies[0].message == "Database unreachable"


@pytest.mark.asyncio
async def test_mongo_not_configured() -> None:
    health = await HealthCheckService(None).evaluate()

    assert health.status is ServiceStatus.UNKNOWN
    assert health.dependencies[0].latency_ms is None
