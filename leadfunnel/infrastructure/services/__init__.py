"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .workflow_id_generator import TimestampWorkflowIdGenerator

__all__ = ["HealthCheckService", "TimestampWorkflowIdGenerator"]
