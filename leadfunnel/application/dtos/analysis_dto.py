"""
Analysis DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the analysis workflow:
the inbound request accepted by ``/api/analyze`` and the aggregated result
returned in the success envelope.
"""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from leadfunnel.domain.entities.errors import RequestValidationError
from leadfunnel.domain.entities.workflow import AnalysisRequest, WorkflowResult
from leadfunnel.shared.consts import EnumStylePreference

_HTTP_URL = TypeAdapter(HttpUrl)


class AnalyzeRequestDTO(BaseModel):
    """DTO for an inbound analysis request."""

    url: str = Field(description="Website to analyze (http or https)")
    include_seo: bool = Field(default=True, description="Include SEO analysis")
    max_pages: int = Field(
        default=3, ge=1, le=10, description="Maximum pages the analyzer may crawl"
    )
    generate_homepage: bool = Field(
        default=True, description="Generate a redesigned homepage"
    )
    style_preference: EnumStylePreference = Field(
        default=EnumStylePreference.MODERN,
        description="Visual style for the generated homepage",
    )
    include_booking: bool = Field(
        default=False, description="Add a booking section to the homepage"
    )

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "url": "https://example-bakery.com",
                "include_seo": True,
                "max_pages": 3,
                "generate_homepage": True,
                "style_preference": "modern",
                "include_booking": False,
            }
        },
    }

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        # Validated as an http(s) URL but forwarded as the caller wrote it.
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError("URL must be an absolute http(s) URL") from exc
        return value

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalyzeRequestDTO":
        """
        Validate a decoded JSON body.

        Raises:
            RequestValidationError: ``missing_url`` when there is no url,
                ``invalid_url`` when it does not parse as http(s), and
                ``invalid_request`` for any other invalid field
        """
        if not isinstance(payload, dict) or not payload.get("url"):
            raise RequestValidationError("URL is required", code="missing_url")

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            if any(error["loc"][:1] == ("url",) for error in errors):
                raise RequestValidationError(
                    "Invalid URL format", code="invalid_url"
                ) from exc
            raise RequestValidationError(
                "Invalid request parameters",
                details=_describe_errors(errors),
                code="invalid_request",
            ) from exc

    def to_domain(self) -> AnalysisRequest:
        return AnalysisRequest(
            url=self.url,
            include_seo=self.include_seo,
            max_pages=self.max_pages,
            generate_homepage=self.generate_homepage,
            style_preference=self.style_preference,
            include_booking=self.include_booking,
        )


class WorkflowResultDTO(BaseModel):
    """DTO carried in ``data`` of a successful analyze response."""

    analysis: Dict[str, Any] = Field(description="Analyzer result, unchanged")
    homepage: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Builder result, with ``screenshot`` when one was rendered",
    )
    total_processing_time: int = Field(description="Workflow duration in ms")
    workflow_id: str = Field(description="Identifier used in every log line")

    @classmethod
    def from_domain(cls, result: WorkflowResult) -> "WorkflowResultDTO":
        return cls(
            analysis=result.analysis,
            homepage=result.homepage,
            total_processing_time=result.total_processing_time,
            workflow_id=result.workflow_id,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize, leaving ``homepage`` out entirely when absent."""
        payload = self.model_dump(mode="json")
        if self.homepage is None:
            payload.pop("homepage", None)
        return payload

    model_config = {
        "json_schema_extra": {
            "example": {
                "analysis": {
                    "id": "an_123",
                    "url": "https://example-bakery.com",
                    "business_info": {"name": "Example Bakery"},
                    "recommendations": [],
                    "confidence_score": 0.87,
                },
                "homepage": {
                    "business_name": "Example Bakery",
                    "html_code": "<main>...</main>",
                    "css_code": "main { ... }",
                    "screenshot": "data:image/png;base64,iVBORw0...",
                },
                "total_processing_time": 41250,
                "workflow_id": "workflow_1760700000000_4f1c2a9b7d3e",
            }
        }
    }


def _describe_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in errors
    ]
