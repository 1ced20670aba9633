"""
Health domain entities.

The API depends on MongoDB only; `/health` reports its availability so load
balancers can take an instance without a database out of rotation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class ServiceStatus(str, Enum):
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Outcome of one dependency probe; `error` is set only when it failed."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    error: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, dependencies: Sequence[DependencyStatus]) -> SystemHealth:
        """Down if any dependency is down, unknown if any is unknown, else up."""
        statuses = {dependency.status for dependency in dependencies}
        if ServiceStatus.DOWN in statuses:
            status = ServiceStatus.DOWN
        elif ServiceStatus.UNKNOWN in statuses or not statuses:
            status = ServiceStatus.UNKNOWN
        else:
            status = ServiceStatus.UP
        return cls(status=status, dependencies=list(dependencies))

    @property
    def is_available(self) -> bool:
        return self.status is not ServiceStatus.DOWN
