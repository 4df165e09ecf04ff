from __future__ import annotations

from datetime import timezone

from leadfunnel.domain.entities.health import (
    DependencyHealth,
    DownstreamHealthReport,
    OverallStatus,
    ServiceStatus,
)


def test_dependency_health_defaults_to_unreachable() -> None:
    dependency = DependencyHealth(name="analyzer", url="http://analyzer")

    assert dependency.status is ServiceStatus.UNREACHABLE
    assert dependency.checked_at.tzinfo == timezone.utc
    assert dependency.reachable is False
    assert dependency.healthy is False


def test_unhealthy_dependency_is_reachable() -> None:
    dependency = DependencyHealth(
        name="builder", url="http://builder", status=ServiceStatus.UNHEALTHY
    )

    assert dependency.reachable is True
    assert dependency.healthy is False


def test_report_lookup_by_name() -> None:
    analyzer = DependencyHealth(
        name="analyzer", url="http://analyzer", status=ServiceStatus.HEALTHY
    )
    report = DownstreamHealthReport(
        status=OverallStatus.DEGRADED, dependencies=[analyzer]
    )

    assert report.get("analyzer") is analyzer
    assert report.get("builder") is None
