"""
Service Token Security - Presentation Layer

Static bearer-token authentication shared between the orchestrator and its
callers. Endpoints opt in with one of two decorators:

- ``with_auth`` rejects the request unless the token matches
- ``with_optional_auth`` always runs the endpoint and only records whether
  the token matched

Both expect the endpoint to accept ``request`` and ``authenticator`` keyword
arguments, the latter injected from the container::

    @router.post("/analyze")
    @inject
    @with_auth
    async def analyze(
        request: Request,
        authenticator: ServiceTokenAuthenticator = Depends(
            Provide["service_token_authenticator"]
        ),
    ): ...
"""

import functools
import hmac
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from fastapi import Request, status

from leadfunnel.domain.entities.errors import (
    AuthConfigurationError,
    AuthenticationError,
)
from leadfunnel.presentation.responses import domain_error_response, error_response
from leadfunnel.shared import get_logger
from leadfunnel.shared.consts import BEARER_SCHEME

logger = get_logger(__name__)

Handler = TypeVar("Handler", bound=Callable[..., Awaitable[Any]])


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of an exact ``Bearer <token>`` header, else None."""
    if not authorization:
        return None

    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0] == BEARER_SCHEME and parts[1]:
        return parts[1]

    return None


class ServiceTokenAuthenticator:
    """Compare caller tokens against the configured shared token."""

    def __init__(self, expected_token: Optional[str]) -> None:
        self._expected_token = expected_token or None

    @property
    def configured(self) -> bool:
        return self._expected_token is not None

    def authenticate(self, authorization: Optional[str]) -> None:
        """
        Validate an ``Authorization`` header value.

        Raises:
            AuthConfigurationError: If no shared token is configured; checked
                before the caller's header is looked at
            AuthenticationError: ``missing_token`` or ``invalid_token``
        """
        if self._expected_token is None:
            raise AuthConfigurationError()

        token = extract_bearer_token(authorization)
        if token is None:
            raise AuthenticationError(
                "Missing authentication token",
                details="Authorization header with Bearer token required",
                code="missing_token",
            )

        if not self._matches(token):
            raise AuthenticationError(
                "Invalid authentication token", code="invalid_token"
            )

    def is_authenticated(self, authorization: Optional[str]) -> bool:
        token = extract_bearer_token(authorization)
        return (
            token is not None
            and self._expected_token is not None
            and self._matches(token)
        )

    def _matches(self, token: str) -> bool:
        return hmac.compare_digest(
            token.encode("utf-8"), (self._expected_token or "").encode("utf-8")
        )


def is_authenticated(request: Request) -> bool:
    """Whether ``with_auth``/``with_optional_auth`` accepted this request."""
    return getattr(request.state, "authenticated", False) is True


def with_auth(handler: Handler) -> Handler:
    """Run ``handler`` only for callers presenting the shared token."""

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            request: Request = kwargs["request"]
            authenticator: ServiceTokenAuthenticator = kwargs["authenticator"]

            authenticator.authenticate(request.headers.get("Authorization"))
            request.state.authenticated = True

            return await handler(*args, **kwargs)

        except AuthConfigurationError as exc:
            logger.error("auth.not_configured", path=_path(kwargs))
            return domain_error_response(exc)

        except AuthenticationError as exc:
            logger.warning("auth.rejected", code=exc.code, path=_path(kwargs))
            return domain_error_response(exc)

        except Exception as exc:
            logger.error(
                "auth.unexpected_error", error=str(exc), path=_path(kwargs), exc_info=exc
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Authentication error",
                "auth_error",
                details=str(exc) or type(exc).__name__,
            )

    return wrapper  # type: ignore[return-value]


def with_optional_auth(handler: Handler) -> Handler:
    """Run ``handler`` for everyone, flagging callers with a valid token."""

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request: Request = kwargs["request"]

        try:
            authenticator: ServiceTokenAuthenticator = kwargs["authenticator"]
            authenticated = authenticator.is_authenticated(
                request.headers.get("Authorization")
            )
        except Exception as exc:
            logger.warning("auth.optional.evaluation_failed", error=str(exc))
            authenticated = False

        request.state.authenticated = authenticated
        return await handler(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _path(kwargs: Dict[str, Any]) -> Optional[str]:
    request = kwargs.get("request")
    return request.url.path if isinstance(request, Request) else None
