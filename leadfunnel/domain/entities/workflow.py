"""
Workflow domain entities.

Value objects for one analysis workflow: the validated request, the outcome
of each downstream call, and the aggregated result returned to the caller.
Analyzer and builder payloads are opaque dictionaries and are passed through
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from leadfunnel.shared.consts import EnumStylePreference


@dataclass(frozen=True, slots=True)
class AnalysisRequest:
    """Validated input of a workflow."""

    url: str
    include_seo: bool = True
    max_pages: int = 3
    generate_homepage: bool = True
    style_preference: EnumStylePreference = EnumStylePreference.MODERN
    include_booking: bool = False


class FailureKind(str, Enum):
    """Why a downstream call did not produce a usable payload."""

    TRANSPORT = "transport"
    APPLICATION = "application"


@dataclass(frozen=True, slots=True)
class DownstreamSuccess:
    """The ``data`` member of a successful downstream response."""

    payload: Dict[str, Any]
    url: str
    status_code: int
    duration_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class DownstreamFailure:
    """A failed downstream call, with as much upstream context as available."""

    kind: FailureKind
    message: str
    url: str
    status_code: Optional[int] = None
    body: Any = None
    duration_ms: float = 0.0


DownstreamResult = Union[DownstreamSuccess, DownstreamFailure]


@dataclass(frozen=True, slots=True)
class WorkflowResult:
    """Aggregated outcome of a workflow; ``homepage`` is None when skipped."""

    workflow_id: str
    analysis: Dict[str, Any]
    homepage: Optional[Dict[str, Any]]
    total_processing_time: int


def extract_business_name(analysis: Dict[str, Any]) -> Optional[str]:
    """Return the business name detected by the analyzer, if usable."""
    business_info = analysis.get("business_info")
    if not isinstance(business_info, dict):
        return None
    name = business_info.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return None
