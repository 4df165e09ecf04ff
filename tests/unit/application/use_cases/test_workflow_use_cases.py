from __future__ import annotations

from time import perf_counter

import pytest

from leadfunnel.application.use_cases.workflow_use_cases import (
    RunAnalysisWorkflowUseCase,
)
from leadfunnel.domain.entities.errors import AnalysisError
from leadfunnel.domain.entities.workflow import AnalysisRequest
from leadfunnel.shared.consts import EnumStylePreference
from tests.support import (
    FakeAnalyzerGateway,
    FakeBuilderGateway,
    FakeWorkflowIdGenerator,
    application_failure,
    success,
    transport_failure,
)

SCREENSHOT = "data:image/png;base64,iVBORw0KGgo="


def _use_case(analyzer, builder) -> RunAnalysisWorkflowUseCase:
    return RunAnalysisWorkflowUseCase(
        analyzer_gateway=analyzer,
        builder_gateway=builder,
        workflow_id_generator=FakeWorkflowIdGenerator(),
    )


@pytest.mark.asyncio
async def test_full_workflow_returns_homepage_with_screenshot(
    analysis_payload, homepage_payload
) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(
        success(homepage_payload), success({"screenshot": SCREENSHOT})
    )
    use_case = _use_case(analyzer, builder)

    result = await use_case.execute(
        AnalysisRequest(
            url="https://bakery.example",
            max_pages=5,
            style_preference=EnumStylePreference.BOLD,
            include_booking=True,
        ),
        workflow_id="workflow_42_abc",
    )

    assert result.workflow_id == "workflow_42_abc"
    assert result.analysis == analysis_payload
    assert result.homepage == {**homepage_payload, "screenshot": SCREENSHOT}
    assert result.total_processing_time >= 0

    assert analyzer.calls == [
        {"url": "https://bakery.example", "include_seo": True, "max_pages": 5}
    ]
    assert builder.generate_calls == [
        {
            "analysis_result": analysis_payload,
            "business_name": "Rose Bakery",
            "style_preference": "bold",
            "include_booking": True,
        }
    ]
    assert builder.screenshot_calls == [
        {
            "html_code": homepage_payload["html_code"],
            "css_code": homepage_payload["css_code"],
            "format": "png",
            "viewport": "desktop",
        }
    ]


@pytest.mark.asyncio
async def test_workflow_id_is_generated_when_omitted(analysis_payload) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(success({}), success({}))

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example", generate_homepage=False)
    )

    assert result.workflow_id == "workflow_1760700000000_000000000001"


@pytest.mark.asyncio
async def test_homepage_not_requested_skips_builder(analysis_payload) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(success({}), success({}))

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example", generate_homepage=False)
    )

    assert result.homepage is None
    assert builder.generate_calls == []
    assert builder.screenshot_calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "business_info", [{}, {"name": ""}, {"name": None}, "not-a-dict"]
)
async def test_missing_business_name_skips_builder(
    analysis_payload, business_info
) -> None:
    analysis_payload["business_info"] = business_info
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(success({}), success({}))

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example")
    )

    assert result.homepage is None
    assert builder.generate_calls == []


@pytest.mark.asyncio
async def test_transport_failure_of_analyzer_aborts_workflow() -> None:
    analyzer = FakeAnalyzerGateway(
        transport_failure(
            "Request failed with status code 503", url="http://analyzer/analyze"
        )
    )
    builder = FakeBuilderGateway(success({}), success({}))

    with pytest.raises(AnalysisError) as exc_info:
        await _use_case(analyzer, builder).execute(
            AnalysisRequest(url="https://bakery.example")
        )

    error = exc_info.value
    assert error.code == "analyzer_service_error"
    assert error.message == (
        "Analysis service failed: Request failed with status code 503"
    )
    assert error.details == {"status": 503, "url": "http://analyzer/analyze"}
    assert builder.generate_calls == []


@pytest.mark.asyncio
async def test_application_failure_of_analyzer_aborts_workflow() -> None:
    analyzer = FakeAnalyzerGateway(application_failure("Site unreachable"))
    builder = FakeBuilderGateway(success({}), success({}))

    with pytest.raises(AnalysisError) as exc_info:
        await _use_case(analyzer, builder).execute(
            AnalysisRequest(url="https://bakery.example")
        )

    error = exc_info.value
    assert error.code == "analysis_failed"
    assert error.message == "Website analysis failed"
    assert error.details == {"error": "Site unreachable"}
    assert builder.generate_calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "generate_result",
    [transport_failure(url="http://builder/generate"), application_failure()],
)
async def test_builder_failure_is_not_fatal(analysis_payload, generate_result) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(generate_result, success({"screenshot": SCREENSHOT}))

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example")
    )

    assert result.analysis == analysis_payload
    assert result.homepage is None
    assert builder.screenshot_calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "screenshot_result",
    [
        transport_failure(url="http://builder/screenshot"),
        application_failure(),
        success({}),
        success({"screenshot": ""}),
    ],
)
async def test_screenshot_failure_keeps_homepage(
    analysis_payload, homepage_payload, screenshot_result
) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(success(homepage_payload), screenshot_result)

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example")
    )

    assert result.homepage == homepage_payload
    assert "screenshot" not in result.homepage


@pytest.mark.asyncio
async def test_builder_payload_is_not_mutated(analysis_payload, homepage_payload) -> None:
    original = dict(homepage_payload)
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(
        success(homepage_payload), success({"screenshot": SCREENSHOT})
    )

    await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example")
    )

    assert homepage_payload == original


@pytest.mark.asyncio
async def test_processing_time_counts_from_given_start(analysis_payload) -> None:
    analyzer = FakeAnalyzerGateway(success(analysis_payload))
    builder = FakeBuilderGateway(success({}), success({}))

    result = await _use_case(analyzer, builder).execute(
        AnalysisRequest(url="https://bakery.example", generate_homepage=False),
        started_at=perf_counter() - 2.0,
    )

    assert result.total_processing_time >= 2000
