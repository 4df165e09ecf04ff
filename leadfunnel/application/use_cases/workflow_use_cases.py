"""
Workflow Use Cases - Application Layer

This module drives one analysis workflow across the downstream services:

1. Analyze the website (mandatory; any failure aborts the workflow)
2. Generate a homepage when requested and a business name was detected
   (best effort; failure leaves the homepage out)
3. Render a screenshot of that homepage (best effort; failure leaves the
   screenshot out)

The calls are strictly sequential since each step consumes the previous
step's output.
"""

from time import perf_counter
from typing import Any, Dict, Optional

from leadfunnel.domain.entities.errors import AnalysisError
from leadfunnel.domain.entities.workflow import (
    AnalysisRequest,
    DownstreamFailure,
    FailureKind,
    WorkflowResult,
    extract_business_name,
)
from leadfunnel.domain.gateways.analyzer_gateway import IAnalyzerGateway
from leadfunnel.domain.gateways.builder_gateway import IBuilderGateway
from leadfunnel.domain.ports.workflow_id import IWorkflowIdGenerator
from leadfunnel.shared import get_logger
from leadfunnel.shared.logging import log_context

logger = get_logger(__name__)


class RunAnalysisWorkflowUseCase:
    """Use case running the analyze → generate → screenshot workflow."""

    def __init__(
        self,
        analyzer_gateway: IAnalyzerGateway,
        builder_gateway: IBuilderGateway,
        workflow_id_generator: IWorkflowIdGenerator,
    ) -> None:
        self._analyzer_gateway = analyzer_gateway
        self._builder_gateway = builder_gateway
        self._workflow_id_generator = workflow_id_generator

    def new_workflow_id(self) -> str:
        return self._workflow_id_generator.new_id()

    async def execute(
        self,
        request: AnalysisRequest,
        workflow_id: Optional[str] = None,
        started_at: Optional[float] = None,
    ) -> WorkflowResult:
        """
        Run the workflow for a validated request.

        Args:
            request: Validated analysis request
            workflow_id: Identifier allocated by the caller; a new one is
                generated when omitted
            started_at: ``perf_counter`` reading taken when the request
                arrived; ``total_processing_time`` is measured from it and
                defaults to now

        Returns:
            WorkflowResult: analysis plus the homepage when one was produced

        Raises:
            AnalysisError: If the analyzer could not produce an analysis
        """
        workflow_id = workflow_id or self.new_workflow_id()
        start = perf_counter() if started_at is None else started_at

        with log_context(workflow_id=workflow_id):
            logger.info(
                "workflow.started",
                url=request.url,
                include_seo=request.include_seo,
                max_pages=request.max_pages,
                generate_homepage=request.generate_homepage,
                style_preference=request.style_preference.value,
                include_booking=request.include_booking,
            )

            analysis = await self._analyze(request)
            homepage = await self._generate_homepage(request, analysis)

            total_processing_time = int((perf_counter() - start) * 1000)

            logger.info(
                "workflow.completed",
                total_processing_time_ms=total_processing_time,
                confidence_score=analysis.get("confidence_score"),
                homepage_generated=homepage is not None,
                features_count=_size(homepage.get("features_included"))
                if homepage
                else 0,
                screenshot_chars=_size(homepage["screenshot"])
                if homepage and "screenshot" in homepage
                else 0,
            )

            return WorkflowResult(
                workflow_id=workflow_id,
                analysis=analysis,
                homepage=homepage,
                total_processing_time=total_processing_time,
            )

    async def _analyze(self, request: AnalysisRequest) -> Dict[str, Any]:
        logger.info("workflow.analysis.started", url=request.url)

        result = await self._analyzer_gateway.analyze(
            request.url, request.include_seo, request.max_pages
        )

        if isinstance(result, DownstreamFailure):
            logger.error(
                "workflow.analysis.failed",
                kind=result.kind.value,
                error=result.message,
                url=result.url,
                status_code=result.status_code,
                response_body=result.body,
            )
            raise self._to_analysis_error(result)

        analysis = result.payload
        business_info = analysis.get("business_info")
        if not isinstance(business_info, dict):
            business_info = {}
        logger.info(
            "workflow.analysis.completed",
            duration_ms=round(result.duration_ms, 1),
            analyzer_processing_time=analysis.get("processing_time"),
            business_name=business_info.get("name"),
            business_type=business_info.get("business_type"),
            recommendation_count=_size(analysis.get("recommendations")),
            confidence_score=analysis.get("confidence_score"),
        )
        return analysis

    async def _generate_homepage(
        self, request: AnalysisRequest, analysis: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        if not request.generate_homepage:
            logger.info("workflow.homepage.skipped", reason="not_requested")
            return None

        business_name = extract_business_name(analysis)
        if business_name is None:
            logger.info("workflow.homepage.skipped", reason="missing_business_name")
            return None

        logger.info(
            "workflow.homepage.started",
            business_name=business_name,
            style_preference=request.style_preference.value,
        )

        result = await self._builder_gateway.generate_homepage(
            analysis_result=analysis,
            business_name=business_name,
            style_preference=request.style_preference.value,
            include_booking=request.include_booking,
        )

        if isinstance(result, DownstreamFailure):
            logger.warning(
                "workflow.homepage.failed",
                non_fatal=True,
                kind=result.kind.value,
                error=result.message,
                url=result.url,
                status_code=result.status_code,
                response_body=result.body,
            )
            return None

        homepage = dict(result.payload)
        logger.info(
            "workflow.homepage.completed",
            duration_ms=round(result.duration_ms, 1),
            builder_generation_time=homepage.get("generation_time"),
            html_chars=_size(homepage.get("html_code")),
            css_chars=_size(homepage.get("css_code")),
            features=homepage.get("features_included") or [],
        )

        screenshot = await self._capture_screenshot(homepage)
        if screenshot is not None:
            homepage["screenshot"] = screenshot

        return homepage

    async def _capture_screenshot(self, homepage: Dict[str, Any]) -> Optional[str]:
        html_code = homepage.get("html_code") or ""
        css_code = homepage.get("css_code") or ""

        logger.info("workflow.screenshot.started", html_chars=_size(html_code))

        result = await self._builder_gateway.render_screenshot(html_code, css_code)

        if isinstance(result, DownstreamFailure):
            logger.warning(
                "workflow.screenshot.failed",
                non_fatal=True,
                kind=result.kind.value,
                error=result.message,
                url=result.url,
                status_code=result.status_code,
                response_body=result.body,
            )
            return None

        screenshot = result.payload.get("screenshot")
        if not isinstance(screenshot, str) or not screenshot:
            logger.warning(
                "workflow.screenshot.empty", non_fatal=True, url=result.url
            )
            return None

        logger.info(
            "workflow.screenshot.completed",
            duration_ms=round(result.duration_ms, 1),
            builder_generation_time=result.payload.get("generation_time"),
            screenshot_chars=len(screenshot),
        )
        return screenshot

    @staticmethod
    def _to_analysis_error(failure: DownstreamFailure) -> AnalysisError:
        if failure.kind is FailureKind.TRANSPORT:
            return AnalysisError(
                f"Analysis service failed: {failure.message}",
                details={"status": failure.status_code, "url": failure.url},
                code="analyzer_service_error",
            )
        return AnalysisError(
            "Website analysis failed",
            details={"error": failure.message},
            code="analysis_failed",
        )


def _size(value: Any) -> int:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value)
    return 0
