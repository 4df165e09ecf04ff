"""Shared HTTP plumbing for the downstream service gateways."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Any, Dict, Optional

import httpx

from leadfunnel.domain.entities.workflow import (
    DownstreamFailure,
    DownstreamResult,
    DownstreamSuccess,
    FailureKind,
)
from leadfunnel.shared import get_logger
from leadfunnel.shared.consts import BEARER_SCHEME

logger = get_logger(__name__)

MAX_LOGGED_BODY_CHARS = 2000


class ServiceGateway:
    """
    POST JSON to a downstream service and translate the outcome.

    Downstream services answer with ``{"success": bool, "data": {...},
    "error": ...}``. Every call is turned into a ``DownstreamSuccess`` or a
    ``DownstreamFailure``; nothing raised by httpx escapes this class.
    """

    service_name = "service"

    def __init__(self, base_url: str, auth_token: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self._auth_token = auth_token

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._auth_token:
            headers["Authorization"] = f"{BEARER_SCHEME} {self._auth_token}"
        return headers

    async def _post(
        self,
        path: str,
        payload: Dict[str, Any],
        *,
        timeout: float,
        event: str,
    ) -> DownstreamResult:
        url = f"{self.base_url}{path}"
        start = perf_counter()

        logger.info(f"{event}.request", url=url, timeout_s=timeout)

        try:
            # httpx applies the timeout per phase; wait_for bounds the whole call.
            response = await asyncio.wait_for(
                self._send(url, payload, timeout), timeout=timeout
            )

        except httpx.HTTPStatusError as e:
            return self._failure(
                event,
                FailureKind.TRANSPORT,
                f"Request failed with status code {e.response.status_code}",
                url,
                start,
                status_code=e.response.status_code,
                body=_response_body(e.response),
            )

        except (httpx.TimeoutException, asyncio.TimeoutError):
            return self._failure(
                event,
                FailureKind.TRANSPORT,
                f"Request timed out after {timeout:g}s",
                url,
                start,
            )

        except (httpx.RequestError, httpx.InvalidURL) as e:
            return self._failure(
                event,
                FailureKind.TRANSPORT,
                f"Failed to communicate with {self.service_name} service: {e}",
                url,
                start,
            )

        try:
            body = response.json()
        except ValueError as e:
            return self._failure(
                event,
                FailureKind.APPLICATION,
                f"{self.service_name.capitalize()} service returned invalid JSON: {e}",
                url,
                start,
                status_code=response.status_code,
                body=_response_body(response),
            )

        if not isinstance(body, dict) or body.get("success") is not True:
            return self._failure(
                event,
                FailureKind.APPLICATION,
                _error_message(body)
                or f"{self.service_name.capitalize()} service reported a failure",
                url,
                start,
                status_code=response.status_code,
                body=body,
            )

        data = body.get("data")
        if not isinstance(data, dict):
            return self._failure(
                event,
                FailureKind.APPLICATION,
                f"{self.service_name.capitalize()} service returned no data",
                url,
                start,
                status_code=response.status_code,
                body=body,
            )

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            f"{event}.response",
            url=url,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        )
        return DownstreamSuccess(
            payload=data,
            url=url,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

    async def _send(
        self, url: str, payload: Dict[str, Any], timeout: float
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, json=payload, headers=self._headers())
            response.raise_for_status()
        return response

    def _failure(
        self,
        event: str,
        kind: FailureKind,
        message: str,
        url: str,
        start: float,
        *,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> DownstreamFailure:
        duration_ms = (perf_counter() - start) * 1000
        logger.warning(
            f"{event}.failed",
            kind=kind.value,
            error=message,
            url=url,
            status_code=status_code,
            response_body=body,
            duration_ms=round(duration_ms, 1),
        )
        return DownstreamFailure(
            kind=kind,
            message=message,
            url=url,
            status_code=status_code,
            body=body,
            duration_ms=duration_ms,
        )


def _error_message(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str) and error:
        return error
    return None


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text[:MAX_LOGGED_BODY_CHARS]
