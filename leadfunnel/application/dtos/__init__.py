"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .analysis_dto import AnalyzeRequestDTO, WorkflowResultDTO
from .envelope_dto import AnalyzeEnvelopeDTO, ErrorDTO
from .health_dto import (
    ApplicationInfoDTO,
    HealthStatusDTO,
    OrchestratorStatusDTO,
    RuntimeInfoDTO,
    ServiceEndpointsDTO,
    ServiceHealthDTO,
    ServicesHealthDTO,
)

__all__ = [
    "AnalyzeRequestDTO",
    "WorkflowResultDTO",
    "AnalyzeEnvelopeDTO",
    "ErrorDTO",
    "ApplicationInfoDTO",
    "HealthStatusDTO",
    "OrchestratorStatusDTO",
    "RuntimeInfoDTO",
    "ServiceEndpointsDTO",
    "ServiceHealthDTO",
    "ServicesHealthDTO",
]
