"""WorkException hierarchy."""

from __future__ import annotations


class WorkException(Exception):
    """Base for all work exceptions."""


class WorkCancelled(WorkException):
    """The cancellation signal fired before the work finished."""

    def __init__(
        self, detail: str = "request cancelled", *, elapsed_ms: float = 0.0
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.elapsed_ms = elapsed_ms
