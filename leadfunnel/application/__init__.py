"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It drives the analysis workflow across the downstream
gateways and shapes results into DTOs for the presentation layer.
"""

# Re-export submodules
from leadfunnel.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
