from __future__ import annotations

import pytest

from leadfunnel.application.dtos.analysis_dto import (
    AnalyzeRequestDTO,
    WorkflowResultDTO,
)
from leadfunnel.domain.entities.errors import RequestValidationError
from leadfunnel.domain.entities.workflow import WorkflowResult
from leadfunnel.shared.consts import EnumStylePreference


def test_from_payload_applies_defaults() -> None:
    request = AnalyzeRequestDTO.from_payload({"url": "https://bakery.example"}).to_domain()

    assert request.url == "https://bakery.example"
    assert request.include_seo is True
    assert request.max_pages == 3
    assert request.generate_homepage is True
    assert request.style_preference is EnumStylePreference.MODERN
    assert request.include_booking is False


def test_from_payload_keeps_explicit_values() -> None:
    request = AnalyzeRequestDTO.from_payload(
        {
            "url": "http://bakery.example/menu",
            "include_seo": False,
            "max_pages": 10,
            "generate_homepage": False,
            "style_preference": "classic",
            "include_booking": True,
            "unknown_field": "ignored",
        }
    ).to_domain()

    assert request.include_seo is False
    assert request.max_pages == 10
    assert request.generate_homepage is False
    assert request.style_preference is EnumStylePreference.CLASSIC
    assert request.include_booking is True


@pytest.mark.parametrize("payload", [None, [], "https://x.example", {}, {"url": ""}])
def test_from_payload_requires_url(payload) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        AnalyzeRequestDTO.from_payload(payload)

    assert exc_info.value.code == "missing_url"
    assert exc_info.value.message == "URL is required"


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "ftp://bakery.example",
        "https://",
        "bakery.example",
        42,
        "http://exa mple.com",
        "https://bakery.example:99999",
        "https://bakery.example:abc",
        "http://<bad>/",
    ],
)
def test_from_payload_rejects_invalid_url(url) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        AnalyzeRequestDTO.from_payload({"url": url})

    assert exc_info.value.code == "invalid_url"
    assert exc_info.value.message == "Invalid URL format"


@pytest.mark.parametrize(
    "field, value",
    [
        ("max_pages", 0),
        ("max_pages", 11),
        ("style_preference", "fancy"),
        ("include_seo", "perhaps"),
    ],
)
def test_from_payload_rejects_invalid_options(field, value) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        AnalyzeRequestDTO.from_payload({"url": "https://bakery.example", field: value})

    error = exc_info.value
    assert error.code == "invalid_request"
    assert error.details[0]["field"] == field


def test_workflow_result_payload_omits_missing_homepage() -> None:
    dto = WorkflowResultDTO.from_domain(
        WorkflowResult(
            workflow_id="workflow_1_abc",
            analysis={"id": "an_1"},
            homepage=None,
            total_processing_time=12,
        )
    )

    payload = dto.to_payload()

    assert "homepage" not in payload
    assert payload == {
        "analysis": {"id": "an_1"},
        "total_processing_time": 12,
        "workflow_id": "workflow_1_abc",
    }


def test_workflow_result_payload_keeps_homepage() -> None:
    homepage = {"html_code": "<main/>", "screenshot": "data:image/png;base64,AA"}
    dto = WorkflowResultDTO.from_domain(
        WorkflowResult(
            workflow_id="workflow_1_abc",
            analysis={"id": "an_1"},
            homepage=homepage,
            total_processing_time=12,
        )
    )

    assert dto.to_payload()["homepage"] == homepage
