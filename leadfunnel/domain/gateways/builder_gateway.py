"""
Builder Gateway Interface - Domain Layer

This module defines the interface for communicating with the builder
service, which generates homepage code and renders screenshots of it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from leadfunnel.domain.entities.workflow import DownstreamResult


class IBuilderGateway(ABC):
    """Interface for Builder Gateway."""

    @abstractmethod
    async def generate_homepage(
        self,
        analysis_result: Dict[str, Any],
        business_name: str,
        style_preference: str,
        include_booking: bool,
    ) -> DownstreamResult:
        """
        Generate a homepage from an analysis result.

        Returns:
            DownstreamSuccess carrying the homepage payload (``html_code``,
            ``css_code`` and friends), or DownstreamFailure
        """
        pass

    @abstractmethod
    async def render_screenshot(
        self,
        html_code: str,
        css_code: str,
        image_format: str = "png",
        viewport: str = "desktop",
    ) -> DownstreamResult:
        """
        Render a screenshot of generated homepage code.

        Returns:
            DownstreamSuccess whose payload holds ``screenshot`` (base64
            image data), or DownstreamFailure
        """
        pass
