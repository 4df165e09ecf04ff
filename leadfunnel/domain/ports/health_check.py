"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from leadfunnel.domain.entities.health import DownstreamHealthReport


class IHealthCheckService(Protocol):
    """Interface for probing the downstream services."""

    async def evaluate(self) -> DownstreamHealthReport:
        """Probe every downstream service and aggregate the results."""
        ...
