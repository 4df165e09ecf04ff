"""DTOs for the health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field

from leadfunnel.domain.entities.health import (
    DependencyHealth,
    OverallStatus,
    ServiceStatus,
)


class OrchestratorStatusDTO(BaseModel):
    """The orchestrator is healthy by virtue of answering."""

    status: str = Field(default="healthy", description="Always ``healthy``")
    version: str = Field(description="Orchestrator version")
    uptime: int = Field(description="Uptime in milliseconds")


class ServiceHealthDTO(BaseModel):
    """Serializable representation of a downstream service probe."""

    status: ServiceStatus = Field(description="healthy, unhealthy or unreachable")
    url: str = Field(description="Base URL of the service")
    response_time: Optional[int] = Field(
        default=None, description="Probe latency in milliseconds"
    )
    version: Optional[str] = Field(
        default=None, description="Version reported by the service"
    )

    @classmethod
    def from_domain(cls, dependency: DependencyHealth) -> "ServiceHealthDTO":
        return cls(
            status=dependency.status,
            url=dependency.url,
            response_time=dependency.response_time_ms,
            version=dependency.version,
        )


class ServicesHealthDTO(BaseModel):
    orchestrator: OrchestratorStatusDTO
    analyzer: ServiceHealthDTO
    builder: ServiceHealthDTO


class HealthStatusDTO(BaseModel):
    """DTO representing the /api/health response payload."""

    status: OverallStatus = Field(description="Aggregate downstream status")
    version: str = Field(description="Orchestrator version")
    uptime: int = Field(description="Uptime in milliseconds")
    timestamp: datetime = Field(description="Time of this snapshot")
    services: ServicesHealthDTO
    checks: Dict[str, bool] = Field(
        default_factory=dict, description="Boolean readiness checks"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "version": "1.0.0",
                "uptime": 3600500,
                "timestamp": "2026-10-17T12:00:00Z",
                "services": {
                    "orchestrator": {
                        "status": "healthy",
                        "version": "1.0.0",
                        "uptime": 3600500,
                    },
                    "analyzer": {
                        "status": "healthy",
                        "url": "http://analyzer:8001",
                        "response_time": 14,
                        "version": "2.3.0",
                    },
                    "builder": {
                        "status": "unreachable",
                        "url": "http://builder:8002",
                    },
                },
                "checks": {
                    "orchestrator_ready": True,
                    "analyzer_reachable": True,
                    "analyzer_healthy": True,
                    "builder_reachable": False,
                    "builder_healthy": False,
                    "all_services_operational": False,
                },
            }
        }
    }


class RuntimeInfoDTO(BaseModel):
    python: str
    fastapi: str
    uvicorn: str


class ServiceEndpointsDTO(BaseModel):
    """Downstream addresses, only disclosed to authenticated callers."""

    analyzer_url: str
    builder_url: str
    public_api_url: str


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /api/info."""

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Process start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    authenticated: bool = Field(description="Whether the caller's token matched")
    runtime: RuntimeInfoDTO
    services: Optional[ServiceEndpointsDTO] = Field(
        default=None, description="Present for authenticated callers only"
    )
