"""
Analyze Router - Presentation Layer

This module defines the FastAPI router for the analysis workflow endpoint.
"""

from time import perf_counter
from typing import Any

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from leadfunnel.application.dtos.analysis_dto import (
    AnalyzeRequestDTO,
    WorkflowResultDTO,
)
from leadfunnel.application.dtos.envelope_dto import AnalyzeEnvelopeDTO
from leadfunnel.application.use_cases.workflow_use_cases import (
    RunAnalysisWorkflowUseCase,
)
from leadfunnel.domain.entities.errors import (
    AnalysisError,
    MethodNotAllowedError,
    RequestValidationError,
)
from leadfunnel.presentation.responses import (
    domain_error_response,
    error_response,
    success_response,
)
from leadfunnel.presentation.security import ServiceTokenAuthenticator, with_auth
from leadfunnel.shared import get_logger
from leadfunnel.shared.logging import log_context

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Analysis"])

# Every method is routed here so that non-POST calls get the 405 envelope.
ANALYZE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(
    "/analyze",
    methods=ANALYZE_METHODS,
    response_model=None,
    responses={
        200: {"model": AnalyzeEnvelopeDTO, "description": "Workflow completed"},
        400: {"model": AnalyzeEnvelopeDTO, "description": "Invalid request"},
        401: {"model": AnalyzeEnvelopeDTO, "description": "Missing/invalid token"},
        405: {"model": AnalyzeEnvelopeDTO, "description": "Method not allowed"},
        500: {"model": AnalyzeEnvelopeDTO, "description": "Analysis failed"},
    },
)
@inject
@with_auth
async def analyze(
    request: Request,
    authenticator: ServiceTokenAuthenticator = Depends(
        Provide["service_token_authenticator"]
    ),
    run_analysis_workflow_use_case: RunAnalysisWorkflowUseCase = Depends(
        Provide["run_analysis_workflow_use_case"]
    ),
) -> JSONResponse:
    """
    Analyze a website and, optionally, generate an improved homepage.

    Request body: ``{url, include_seo?, max_pages?, generate_homepage?,
    style_preference?, include_booking?}``.

    The analysis is mandatory: if it fails the request fails. Homepage
    generation and its screenshot are best effort and only shrink the
    payload when they fail.
    """
    started_at = perf_counter()

    if request.method != "POST":
        return domain_error_response(MethodNotAllowedError(request.method))

    workflow_id = run_analysis_workflow_use_case.new_workflow_id()

    with log_context(workflow_id=workflow_id):
        try:
            payload = await _read_json(request)
            analysis_request = AnalyzeRequestDTO.from_payload(payload).to_domain()
            result = await run_analysis_workflow_use_case.execute(
                analysis_request, workflow_id=workflow_id, started_at=started_at
            )

        except RequestValidationError as e:
            logger.info("analyze.request.rejected", code=e.code, details=e.details)
            return domain_error_response(e)

        except AnalysisError as e:
            return domain_error_response(e)

        except Exception as e:
            logger.error("analyze.workflow.failed", error=str(e), exc_info=e)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Workflow execution failed",
                "workflow_failed",
                details={"workflow_id": workflow_id, "error": str(e)},
            )

        return success_response(WorkflowResultDTO.from_domain(result).to_payload())


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None
