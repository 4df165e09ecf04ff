"""Analyzer service gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Optional

from leadfunnel.domain.entities.workflow import DownstreamResult
from leadfunnel.domain.gateways.analyzer_gateway import IAnalyzerGateway
from leadfunnel.infrastructure.gateways.base import ServiceGateway


class AnalyzerGateway(ServiceGateway, IAnalyzerGateway):
    """HTTP client for the analyzer service API."""

    service_name = "analyzer"

    def __init__(
        self,
        analyzer_url: str,
        auth_token: Optional[str] = None,
        timeout: float = 120.0,
    ):
        """
        Initialize Analyzer Gateway.

        Args:
            analyzer_url: Base URL for the analyzer service
            auth_token: Shared service-to-service bearer token
            timeout: Seconds allowed for one analysis, which may crawl
                several pages
        """
        super().__init__(analyzer_url, auth_token)
        self.timeout = timeout

    async def analyze(
        self, url: str, include_seo: bool, max_pages: int
    ) -> DownstreamResult:
        return await self._post(
            "/analyze",
            {"url": url, "include_seo": include_seo, "max_pages": max_pages},
            timeout=self.timeout,
            event="analyzer.analyze",
        )
