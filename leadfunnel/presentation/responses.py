"""
Response Envelope - Presentation Layer

Builds the ``{success, data | error, timestamp}`` JSON responses shared by the
analyze endpoint and the authentication layer, and maps domain errors to
HTTP status codes.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from leadfunnel.application.dtos.envelope_dto import ErrorDTO
from leadfunnel.domain.entities.errors import (
    AnalysisError,
    AuthConfigurationError,
    AuthenticationError,
    DomainError,
    MethodNotAllowedError,
    RequestValidationError,
)

ERROR_STATUS_CODES: Dict[Type[DomainError], int] = {
    RequestValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    MethodNotAllowedError: status.HTTP_405_METHOD_NOT_ALLOWED,
    AuthConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    AnalysisError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def success_response(
    data: Dict[str, Any], status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"success": True, "data": data, "timestamp": envelope_timestamp()}
        ),
    )


def error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[Any] = None,
) -> JSONResponse:
    error = ErrorDTO(message=message, code=code, details=details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "success": False,
                "error": error.to_payload(),
                "timestamp": envelope_timestamp(),
            }
        ),
    )


def status_code_for(error: DomainError) -> int:
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_error_response(error: DomainError) -> JSONResponse:
    return error_response(
        status_code_for(error), error.message, error.code, error.details
    )
