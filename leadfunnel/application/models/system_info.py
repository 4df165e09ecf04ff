"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases.

    ``started_at`` is captured once when the composition root is built and
    is the only source for uptime reporting.
    """

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    analyzer_url: str
    builder_url: str
    public_api_url: str
