"""Infrastructure implementation for downstream health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Iterable, List, Optional
from urllib.parse import urljoin

import httpx

from leadfunnel.domain.entities.health import (
    DependencyHealth,
    DownstreamHealthReport,
    OverallStatus,
    ServiceStatus,
)
from leadfunnel.domain.ports.health_check import IHealthCheckService
from leadfunnel.shared import get_logger

logger = get_logger(__name__)

HEALTH_PATH = "/health"


class HealthCheckService(IHealthCheckService):
    """Probe the analyzer and builder ``/health`` endpoints."""

    def __init__(
        self,
        analyzer_url: str,
        builder_url: str,
        *,
        http_timeout: float = 5.0,
    ) -> None:
        self._analyzer_url = analyzer_url
        self._builder_url = builder_url
        self._http_timeout = http_timeout

    async def evaluate(self) -> DownstreamHealthReport:
        """Run both probes concurrently; one failing never affects the other."""

        checks = {
            "analyzer": (
                self._analyzer_url,
                asyncio.create_task(self._probe("analyzer", self._analyzer_url)),
            ),
            "builder": (
                self._builder_url,
                asyncio.create_task(self._probe("builder", self._builder_url)),
            ),
        }

        dependencies: List[DependencyHealth] = []

        for name, (url, task) in checks.items():
            try:
                dependencies.append(await task)
            except Exception as exc:  # pragma: no cover
                logger.error("health.probe.crashed", service=name, error=str(exc))
                dependencies.append(
                    DependencyHealth(name=name, url=url, message=str(exc))
                )

        return DownstreamHealthReport(
            status=self._aggregate_status(dependencies),
            dependencies=dependencies,
        )

    def _aggregate_status(
        self, dependencies: Iterable[DependencyHealth]
    ) -> OverallStatus:
        dependencies = list(dependencies)

        if all(dependency.healthy for dependency in dependencies):
            return OverallStatus.HEALTHY
        if any(dependency.reachable for dependency in dependencies):
            return OverallStatus.DEGRADED
        return OverallStatus.UNHEALTHY

    async def _probe(self, name: str, base_url: str) -> DependencyHealth:
        if not base_url:
            return DependencyHealth(
                name=name, url=base_url, message="Service URL not configured."
            )

        url = self._normalize_url(base_url, HEALTH_PATH)
        start = perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
            payload = response.json()

        except httpx.HTTPStatusError as exc:
            logger.warning(
                "health.probe.http_error",
                service=name,
                url=url,
                status_code=exc.response.status_code,
            )
            return DependencyHealth(
                name=name,
                url=base_url,
                message=f"HTTP {exc.response.status_code}",
            )

        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning(
                "health.probe.unreachable", service=name, url=url, error=str(exc)
            )
            return DependencyHealth(
                name=name,
                url=base_url,
                message=f"HTTP request failed: {exc}",
            )

        except ValueError:
            payload = None

        response_time_ms = int((perf_counter() - start) * 1000)
        reported_status: Optional[str] = None
        version: Optional[str] = None
        if isinstance(payload, dict):
            reported_status = payload.get("status")
            raw_version = payload.get("version")
            version = str(raw_version) if raw_version is not None else None

        status = (
            ServiceStatus.HEALTHY
            if reported_status == ServiceStatus.HEALTHY.value
            else ServiceStatus.UNHEALTHY
        )

        logger.debug(
            "health.probe.completed",
            service=name,
            status=status.value,
            response_time_ms=response_time_ms,
        )

        return DependencyHealth(
            name=name,
            url=base_url,
            status=status,
            response_time_ms=response_time_ms,
            version=version,
            message=f"Reported status: {reported_status}",
        )

    def _normalize_url(self, base_url: str, path: str) -> str:
        if not path:
            return base_url
        base = base_url if base_url.endswith("/") else f"{base_url}/"
        relative = path.lstrip("/")
        return urljoin(base, relative)
