"""MongoDB probe behind the `/health` endpoint."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Optional

import structlog
from pymongo.errors import PyMongoError

from labs.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from labs.domain.ports.health_check import IHealthCheckService
from labs.infrastructure.database.mongo_database import MongoDatabase

logger = structlog.get_logger(__name__)

MONGO = "mongo"


def _elapsed_ms(start: float) -> float:
    return round((perf_counter() - start) * 1000, 3)


class HealthCheckService(IHealthCheckService):
    def __init__(self, mongo_database: Optional[MongoDatabase]) -> None:
        self._mongo_database = mongo_database

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies([await self._probe_mongo()])

    async def _probe_mongo(self) -> DependencyStatus:
        if self._mongo_database is None:
            return DependencyStatus(
                name=MONGO,
                status=ServiceStatus.UNKNOWN,
                message="No database configured",
            )

        start = perf_counter()
        try:
            # pymongo blocks until server selection times out
            await asyncio.to_thread(self._mongo_database.ping)
        except PyMongoError as e:
            logger.warning("health.mongo.down", error=str(e))
            return DependencyStatus(
                name=MONGO,
                status=ServiceStatus.DOWN,
                message="Database unreachable",
                error=str(e),
                latency_ms=_elapsed_ms(start),
            )

        return DependencyStatus(
            name=MONGO,
            status=ServiceStatus.UP,
            latency_ms=_elapsed_ms(start),
            details={"database": self._mongo_database.db.name},
        )
