"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi_cancellable_work.context import RequestContext
from fastapi_cancellable_work.outcome import Outcome

# Callback type used by AfterOutcome
OutcomeCallback = Callable[[RequestContext, Outcome], Awaitable[None]]
