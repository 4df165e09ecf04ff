"""
Envelope DTOs - Application Layer

Every response of the analyze endpoint and of the authentication layer uses
the same ``{success, data | error, timestamp}`` shape.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from leadfunnel.application.dtos.analysis_dto import WorkflowResultDTO


class ErrorDTO(BaseModel):
    """Machine-readable failure description."""

    message: str = Field(description="Human readable error message")
    code: str = Field(description="Stable error code, e.g. ``missing_url``")
    details: Optional[Any] = Field(
        default=None, description="Additional context such as upstream status"
    )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class AnalyzeEnvelopeDTO(BaseModel):
    """Documented shape of ``/api/analyze`` responses."""

    success: bool = Field(description="Whether the workflow produced data")
    data: Optional[WorkflowResultDTO] = Field(
        default=None, description="Present on success"
    )
    error: Optional[ErrorDTO] = Field(default=None, description="Present on failure")
    timestamp: datetime = Field(description="Response creation time (UTC)")
