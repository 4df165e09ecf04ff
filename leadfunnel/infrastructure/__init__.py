"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the downstream
analyzer and builder services.
"""

from leadfunnel.infrastructure import gateways, services

__all__ = ["gateways", "services"]
