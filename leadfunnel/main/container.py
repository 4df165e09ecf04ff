"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from datetime import datetime, timezone
from typing import Optional

from dependency_injector import containers, providers

from leadfunnel.application.models import SystemInfo
from leadfunnel.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from leadfunnel.application.use_cases.workflow_use_cases import (
    RunAnalysisWorkflowUseCase,
)
from leadfunnel.infrastructure.gateways.analyzer_gateway import AnalyzerGateway
from leadfunnel.infrastructure.gateways.builder_gateway import BuilderGateway
from leadfunnel.infrastructure.services.health_check_service import HealthCheckService
from leadfunnel.infrastructure.services.workflow_id_generator import (
    TimestampWorkflowIdGenerator,
)
from leadfunnel.presentation.security import ServiceTokenAuthenticator
from leadfunnel.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()
    started_at = providers.Dependency(instance_of=datetime)

    # Infrastructure
    analyzer_gateway = providers.Singleton(
        AnalyzerGateway,
        analyzer_url=config.services.analyzer_url,
        auth_token=config.services.auth_token,
        timeout=config.services.analyze_timeout,
    )

    builder_gateway = providers.Singleton(
        BuilderGateway,
        builder_url=config.services.builder_url,
        auth_token=config.services.auth_token,
        generate_timeout=config.services.generate_timeout,
        screenshot_timeout=config.services.screenshot_timeout,
    )

    workflow_id_generator = providers.Singleton(TimestampWorkflowIdGenerator)

    health_check_service = providers.Singleton(
        HealthCheckService,
        analyzer_url=config.services.analyzer_url,
        builder_url=config.services.builder_url,
        http_timeout=config.services.health_timeout,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.app.title,
        description=config.app.description,
        version=config.app.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.app.git_commit,
        build_time=config.app.build_time,
        started_at=started_at,
        analyzer_url=config.services.analyzer_url,
        builder_url=config.services.builder_url,
        public_api_url=config.services.public_api_url,
    )

    # Presentation
    service_token_authenticator = providers.Singleton(
        ServiceTokenAuthenticator,
        expected_token=config.services.auth_token,
    )

    # Application (use cases)
    run_analysis_workflow_use_case = providers.Factory(
        RunAnalysisWorkflowUseCase,
        analyzer_gateway=analyzer_gateway,
        builder_gateway=builder_gateway,
        workflow_id_generator=workflow_id_generator,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(
    settings: AppSettings, started_at: Optional[datetime] = None
) -> AppContainer:
    """
    Initialize global container with application settings.

    ``started_at`` is the process start time used for uptime reporting;
    it defaults to now.
    """

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    container.started_at.override(
        providers.Object(started_at or datetime.now(timezone.utc))
    )
    _app_container = container

    logger.info(
        "container.initialized",
        analyzer_url=settings.services.analyzer_url,
        builder_url=settings.services.builder_url,
        auth_configured=bool(settings.services.auth_token),
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
