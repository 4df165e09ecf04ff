"""
Domain Entities Package

This package contains the workflow and health value objects and the domain
error taxonomy.
"""

from .errors import (
    AnalysisError,
    AuthConfigurationError,
    AuthenticationError,
    DomainError,
    MethodNotAllowedError,
    RequestValidationError,
)
from .health import (
    DependencyHealth,
    DownstreamHealthReport,
    OverallStatus,
    ServiceStatus,
)
from .workflow import (
    AnalysisRequest,
    DownstreamFailure,
    DownstreamResult,
    DownstreamSuccess,
    FailureKind,
    WorkflowResult,
    extract_business_name,
)

__all__ = [
    "AnalysisRequest",
    "DownstreamFailure",
    "DownstreamResult",
    "DownstreamSuccess",
    "FailureKind",
    "WorkflowResult",
    "extract_business_name",
    "DependencyHealth",
    "DownstreamHealthReport",
    "OverallStatus",
    "ServiceStatus",
    "DomainError",
    "RequestValidationError",
    "MethodNotAllowedError",
    "AnalysisError",
    "AuthenticationError",
    "AuthConfigurationError",
]
