"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .analyzer_gateway import IAnalyzerGateway
from .builder_gateway import IBuilderGateway

__all__ = ["IAnalyzerGateway", "IBuilderGateway"]
