"""Domain abstraction for workflow identifier generation."""

from __future__ import annotations

from typing import Protocol


class IWorkflowIdGenerator(Protocol):
    """Produces a new identifier for every workflow invocation."""

    def new_id(self) -> str:
        ...
