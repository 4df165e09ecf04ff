"""Test doubles shared across the unit and e2e suites."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import Request

from leadfunnel.domain.entities.workflow import (
    DownstreamFailure,
    DownstreamResult,
    DownstreamSuccess,
    FailureKind,
)


def success(payload: Dict[str, Any], url: str = "http://stub") -> DownstreamSuccess:
    return DownstreamSuccess(payload=payload, url=url, status_code=200)


def transport_failure(
    message: str = "Request failed with status code 503",
    url: str = "http://analyzer/analyze",
    status_code: Optional[int] = 503,
) -> DownstreamFailure:
    return DownstreamFailure(
        kind=FailureKind.TRANSPORT, message=message, url=url, status_code=status_code
    )


def application_failure(
    message: str = "Site unreachable", url: str = "http://analyzer/analyze"
) -> DownstreamFailure:
    return DownstreamFailure(
        kind=FailureKind.APPLICATION, message=message, url=url, status_code=200
    )


@dataclass
class FakeAnalyzerGateway:
    result: DownstreamResult
    calls: List[Dict[str, Any]] = field(default_factory=list)

    async def analyze(
        self, url: str, include_seo: bool, max_pages: int
    ) -> DownstreamResult:
        self.calls.append(
            {"url": url, "include_seo": include_seo, "max_pages": max_pages}
        )
        return self.result


@dataclass
class FakeBuilderGateway:
    generate_result: DownstreamResult
    screenshot_result: DownstreamResult
    generate_calls: List[Dict[str, Any]] = field(default_factory=list)
    screenshot_calls: List[Dict[str, Any]] = field(default_factory=list)

    async def generate_homepage(
        self,
        analysis_result: Dict[str, Any],
        business_name: str,
        style_preference: str,
        include_booking: bool,
    ) -> DownstreamResult:
        self.generate_calls.append(
            {
                "analysis_result": analysis_result,
                "business_name": business_name,
                "style_preference": style_preference,
                "include_booking": include_booking,
            }
        )
        return self.generate_result

    async def render_screenshot(
        self,
        html_code: str,
        css_code: str,
        image_format: str = "png",
        viewport: str = "desktop",
    ) -> DownstreamResult:
        self.screenshot_calls.append(
            {
                "html_code": html_code,
                "css_code": css_code,
                "format": image_format,
                "viewport": viewport,
            }
        )
        return self.screenshot_result


class FakeWorkflowIdGenerator:
    def __init__(self, prefix: str = "workflow_1760700000000_") -> None:
        self._prefix = prefix
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}{self._counter:012d}"



def make_request(
    method: str = "POST",
    body: bytes = b"",
    headers: Optional[Dict[str, str]] = None,
    path: str = "/api/analyze",
) -> Request:
    raw_headers = [
        (key.lower().encode("latin-1"), value.encode("latin-1"))
        for key, value in (headers or {}).items()
    ]

    async def receive() -> Dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": raw_headers,
    }
    return Request(scope, receive)
