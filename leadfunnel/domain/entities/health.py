"""
Health domain entities.

This module defines value objects for representing the reachability of the
downstream services and the aggregate health reported by the orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class ServiceStatus(str, Enum):
    """Health of a single downstream service as seen from the orchestrator."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNREACHABLE = "unreachable"


class OverallStatus(str, Enum):
    """Aggregate status across all downstream services."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass(slots=True)
class DependencyHealth:
    """Result of probing one downstream ``/health`` endpoint."""

    name: str
    url: str
    status: ServiceStatus = ServiceStatus.UNREACHABLE
    response_time_ms: Optional[int] = None
    version: Optional[str] = None
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def reachable(self) -> bool:
        return self.status is not ServiceStatus.UNREACHABLE

    @property
    def healthy(self) -> bool:
        return self.status is ServiceStatus.HEALTHY


@dataclass(slots=True)
class DownstreamHealthReport:
    """Aggregated health of the downstream services."""

    status: OverallStatus
    dependencies: List[DependencyHealth] = field(default_factory=list)

    def get(self, name: str) -> Optional[DependencyHealth]:
        for dependency in self.dependencies:
            if dependency.name == name:
                return dependency
        return None
