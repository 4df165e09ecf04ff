"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .analyzer_gateway import AnalyzerGateway
from .builder_gateway import BuilderGateway

__all__ = ["AnalyzerGateway", "BuilderGateway"]
