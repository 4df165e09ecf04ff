"""
Analyzer Gateway Interface - Domain Layer

This module defines the interface for communicating with the analyzer
service, which inspects a website and returns business and content analysis.
"""

from abc import ABC, abstractmethod

from leadfunnel.domain.entities.workflow import DownstreamResult


class IAnalyzerGateway(ABC):
    """Interface for Analyzer Gateway."""

    @abstractmethod
    async def analyze(
        self, url: str, include_seo: bool, max_pages: int
    ) -> DownstreamResult:
        """
        Request an analysis of ``url``.

        Args:
            url: Website to analyze, forwarded unchanged
            include_seo: Whether the analyzer should add an SEO section
            max_pages: Maximum number of pages the analyzer may crawl

        Returns:
            DownstreamSuccess carrying the analysis payload, or
            DownstreamFailure describing why no analysis is available
        """
        pass
