"""
Domain Errors

Every error carries a stable machine-readable ``code`` that the presentation
layer copies into the response envelope, plus a human message and optional
details.
"""

from typing import Any, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    code = "domain_error"

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.details = details
        if code is not None:
            self.code = code
        super().__init__(message)


class RequestValidationError(DomainError):
    """Raised when an inbound analysis request is rejected before any call."""

    code = "invalid_request"


class MethodNotAllowedError(DomainError):
    """Raised when the analyze endpoint receives anything but POST."""

    code = "method_not_allowed"

    def __init__(self, method: str):
        super().__init__("Method not allowed", details={"method": method})


class AnalysisError(DomainError):
    """Raised when the mandatory analysis step fails; aborts the workflow."""

    code = "analysis_failed"


class AuthenticationError(DomainError):
    """Raised when the caller's bearer token is missing or wrong."""

    code = "invalid_token"


class AuthConfigurationError(DomainError):
    """Raised when no shared service token is configured."""

    code = "auth_not_configured"

    def __init__(self, details: Optional[Any] = None):
        super().__init__("Authentication not properly configured", details)
