"""
Domain Layer Package

Workflow and health entities, the error taxonomy, and the contracts for the
downstream analyzer and builder services. Nothing here depends on HTTP
frameworks or clients.
"""

# Re-export submodules
from leadfunnel.domain import entities, gateways, ports

__all__ = ["entities", "gateways", "ports"]
