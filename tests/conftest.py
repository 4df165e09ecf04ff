from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from leadfunnel.application.models import SystemInfo  # noqa: E402


@pytest.fixture()
def analysis_payload() -> Dict[str, Any]:
    return {
        "id": "an_1",
        "url": "https://bakery.example",
        "business_info": {"name": "Rose Bakery", "business_type": "bakery"},
        "recommendations": [{"title": "Add opening hours"}],
        "confidence_score": 0.87,
        "processing_time": 12.5,
    }


@pytest.fixture()
def homepage_payload() -> Dict[str, Any]:
    return {
        "business_name": "Rose Bakery",
        "html_code": "<main>Rose Bakery</main>",
        "css_code": "main { color: pink; }",
        "features_included": ["hero", "menu"],
        "generation_time": 4.2,
    }


@pytest.fixture()
def started_at() -> datetime:
    return datetime.now(timezone.utc) - timedelta(seconds=90)


@pytest.fixture()
def system_info(started_at: datetime) -> SystemInfo:
    return SystemInfo(
        title="Lead Funnel Orchestrator",
        description="desc",
        version="1.0.0",
        environment="testing",
        git_commit="abc123",
        build_time="now",
        started_at=started_at,
        analyzer_url="http://analyzer:8001",
        builder_url="http://builder:8002",
        public_api_url="http://localhost:3000",
    )
