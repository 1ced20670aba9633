"""Port for probing the API's external dependencies."""

from __future__ import annotations

from typing import Protocol

from labs.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    async def evaluate(self) -> SystemHealth:
        """Probe every dependency and fold the results into one status."""
        ...
