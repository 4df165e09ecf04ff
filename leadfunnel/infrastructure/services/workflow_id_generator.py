"""Workflow identifier generation."""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from leadfunnel.domain.ports.workflow_id import IWorkflowIdGenerator
from leadfunnel.shared.consts import WORKFLOW_ID_PREFIX


class TimestampWorkflowIdGenerator(IWorkflowIdGenerator):
    """
    Build ids of the form ``workflow_<epoch-ms>_<random>``.

    The timestamp keeps ids roughly sortable in logs; the random suffix keeps
    ids unique for calls made within the same millisecond.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        suffix_length: int = 12,
    ) -> None:
        self._clock = clock
        self._suffix_length = suffix_length

    def new_id(self) -> str:
        millis = int(self._clock() * 1000)
        suffix = uuid4().hex[: self._suffix_length]
        return f"{WORKFLOW_ID_PREFIX}_{millis}_{suffix}"
