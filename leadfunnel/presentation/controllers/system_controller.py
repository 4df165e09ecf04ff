"""System endpoints exposing health and info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from leadfunnel.application.dtos.health_dto import ApplicationInfoDTO, HealthStatusDTO
from leadfunnel.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from leadfunnel.presentation.security import (
    ServiceTokenAuthenticator,
    is_authenticated,
    with_optional_auth,
)
from leadfunnel.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["System"])


@router.get(
    "/health", response_model=HealthStatusDTO, response_model_exclude_none=True
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> HealthStatusDTO:
    """
    Report orchestrator liveness and downstream service health.

    Always answers 200: downstream status is informational only.
    """
    try:
        health_status = await get_health_status_use_case.execute()
        logger.debug("health.check.success", status=health_status.status.value)
        return health_status
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        return get_health_status_use_case.unavailable()


@router.get(
    "/info", response_model=ApplicationInfoDTO, response_model_exclude_none=True
)
@inject
@with_optional_auth
async def info(
    request: Request,
    authenticator: ServiceTokenAuthenticator = Depends(
        Provide["service_token_authenticator"]
    ),
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Return application metadata; service addresses need a valid token."""
    try:
        info_response = await get_application_info_use_case.execute(
            authenticated=is_authenticated(request)
        )
        logger.debug("info.retrieved", authenticated=info_response.authenticated)
        return info_response
    except Exception as exc:  # pragma: no cover
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc
