"""
Use Cases Package - Application Layer

This package contains the application use cases that drive the analysis
workflow and report service health.
"""

from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .workflow_use_cases import RunAnalysisWorkflowUseCase

__all__ = [
    "GetApplicationInfoUseCase",
    "GetHealthStatusUseCase",
    "RunAnalysisWorkflowUseCase",
]
