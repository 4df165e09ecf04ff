"""Builder service gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, Optional

from leadfunnel.domain.entities.workflow import DownstreamResult
from leadfunnel.domain.gateways.builder_gateway import IBuilderGateway
from leadfunnel.infrastructure.gateways.base import ServiceGateway
from leadfunnel.shared.consts import SCREENSHOT_FORMAT, SCREENSHOT_VIEWPORT


class BuilderGateway(ServiceGateway, IBuilderGateway):
    """HTTP client for the homepage builder service API."""

    service_name = "builder"

    def __init__(
        self,
        builder_url: str,
        auth_token: Optional[str] = None,
        generate_timeout: float = 60.0,
        screenshot_timeout: float = 30.0,
    ):
        super().__init__(builder_url, auth_token)
        self.generate_timeout = generate_timeout
        self.screenshot_timeout = screenshot_timeout

    async def generate_homepage(
        self,
        analysis_result: Dict[str, Any],
        business_name: str,
        style_preference: str,
        include_booking: bool,
    ) -> DownstreamResult:
        return await self._post(
            "/generate",
            {
                "analysis_result": analysis_result,
                "business_name": business_name,
                "style_preference": style_preference,
                "include_booking": include_booking,
            },
            timeout=self.generate_timeout,
            event="builder.generate",
        )

    async def render_screenshot(
        self,
        html_code: str,
        css_code: str,
        image_format: str = SCREENSHOT_FORMAT,
        viewport: str = SCREENSHOT_VIEWPORT,
    ) -> DownstreamResult:
        return await self._post(
            "/screenshot",
            {
                "html_code": html_code,
                "css_code": css_code,
                "format": image_format,
                "viewport": viewport,
            },
            timeout=self.screenshot_timeout,
            event="builder.screenshot",
        )
