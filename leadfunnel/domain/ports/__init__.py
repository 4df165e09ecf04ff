"""Domain ports package."""

from .health_check import IHealthCheckService
from .workflow_id import IWorkflowIdGenerator

__all__ = ["IHealthCheckService", "IWorkflowIdGenerator"]
