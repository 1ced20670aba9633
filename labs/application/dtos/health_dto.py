"""
Payload of `GET /health`.

Unlike every other route this one is not wrapped in the response envelope and
keeps snake_case keys, since probes read it directly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from labs.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth


class DependencyStatusDTO(BaseModel):
    name: str
    status: ServiceStatus
    message: Optional[str] = None
    error: Optional[str] = Field(default=None, description="Probe failure, if any")
    checked_at: datetime
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, dependency: DependencyStatus) -> DependencyStatusDTO:
        return cls(
            name=dependency.name,
            status=dependency.status,
            message=dependency.message,
            error=dependency.error,
            checked_at=dependency.checked_at,
            latency_ms=dependency.latency_ms,
            details=dict(dependency.details),
        )


class SystemHealthDTO(BaseModel):
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @property
    def is_down(self) -> bool:
        return self.status is ServiceStatus.DOWN

    @classmethod
    def from_domain(cls, health: SystemHealth) -> SystemHealthDTO:
        return cls(
            status=health.status,
            dependencies=[DependencyStatusDTO.from_domain(d) for d in health.dependencies],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "down",
                "dependencies": [
                    {
                        "name": "mongo",
                        "status": "down",
                        "message": "Database unreachable",
                        "error": "localhost:27017: [Errno 111] Connection refused",
                        "checked_at": "2026-05-04T08:00:00Z",
                        "latency_ms": 2001.4,
                        "details": {},
                    }
                ],
            }
        }
    }
