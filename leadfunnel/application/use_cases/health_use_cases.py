"""Use cases for health and application info endpoints."""

import sys
from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from leadfunnel.application.dtos.health_dto import (
    ApplicationInfoDTO,
    HealthStatusDTO,
    OrchestratorStatusDTO,
    RuntimeInfoDTO,
    ServiceEndpointsDTO,
    ServiceHealthDTO,
    ServicesHealthDTO,
)
from leadfunnel.application.models import SystemInfo
from leadfunnel.domain.entities.health import (
    DependencyHealth,
    DownstreamHealthReport,
    OverallStatus,
)
from leadfunnel.domain.ports.health_check import IHealthCheckService
from leadfunnel.shared import package_version


def _uptime_ms(started_at: datetime, now: datetime) -> int:
    return max(0, int((now - started_at).total_seconds() * 1000))


class GetHealthStatusUseCase:
    """Use case responsible for returning the health snapshot."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self) -> HealthStatusDTO:
        report = await self._health_check_service.evaluate()
        return self._build_snapshot(report)

    def unavailable(self) -> HealthStatusDTO:
        """Snapshot used when the probes themselves could not be evaluated."""
        report = DownstreamHealthReport(
            status=OverallStatus.UNHEALTHY,
            dependencies=[
                DependencyHealth(name="analyzer", url=self._info.analyzer_url),
                DependencyHealth(name="builder", url=self._info.builder_url),
            ],
        )
        return self._build_snapshot(report)

    def _build_snapshot(self, report: DownstreamHealthReport) -> HealthStatusDTO:
        now = datetime.now(timezone.utc)
        uptime = _uptime_ms(self._info.started_at, now)

        analyzer = report.get("analyzer") or DependencyHealth(
            name="analyzer", url=self._info.analyzer_url
        )
        builder = report.get("builder") or DependencyHealth(
            name="builder", url=self._info.builder_url
        )

        return HealthStatusDTO(
            status=report.status,
            version=self._info.version,
            uptime=uptime,
            timestamp=now,
            services=ServicesHealthDTO(
                orchestrator=OrchestratorStatusDTO(
                    version=self._info.version, uptime=uptime
                ),
                analyzer=ServiceHealthDTO.from_domain(analyzer),
                builder=ServiceHealthDTO.from_domain(builder),
            ),
            checks=self._checks(analyzer, builder),
        )

    @staticmethod
    def _checks(
        analyzer: DependencyHealth, builder: DependencyHealth
    ) -> Dict[str, bool]:
        return {
            "orchestrator_ready": True,
            "analyzer_reachable": analyzer.reachable,
            "analyzer_healthy": analyzer.healthy,
            "builder_reachable": builder.reachable,
            "builder_healthy": builder.healthy,
            "all_services_operational": analyzer.healthy and builder.healthy,
        }


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(self, system_info: SystemInfo) -> None:
        self._info = system_info

    async def execute(
        self, authenticated: bool, now: Optional[datetime] = None
    ) -> ApplicationInfoDTO:
        now = now or datetime.now(timezone.utc)
        uptime_seconds = max(0.0, (now - self._info.started_at).total_seconds())

        services = None
        if authenticated:
            services = ServiceEndpointsDTO(
                analyzer_url=self._redact_url(self._info.analyzer_url),
                builder_url=self._redact_url(self._info.builder_url),
                public_api_url=self._redact_url(self._info.public_api_url),
            )

        return ApplicationInfoDTO(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=self._info.started_at,
            uptime_seconds=uptime_seconds,
            authenticated=authenticated,
            runtime=RuntimeInfoDTO(
                python=sys.version.split()[0],
                fastapi=package_version("fastapi"),
                uvicorn=package_version("uvicorn"),
            ),
            services=services,
        )

    def _redact_url(self, url: str) -> str:
        if not url:
            return url

        parsed = urlsplit(url)
        if parsed.username or parsed.password:
            hostname = parsed.hostname or ""
            port_part = f":{parsed.port}" if parsed.port else ""
            netloc = f"{hostname}{port_part}"
            return urlunsplit(
                (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
            )

        return url
