"""OutcomeHook base and the AfterOutcome convenience hook."""

from __future__ import annotations

from fastapi_cancellable_work._types import OutcomeCallback
from fastapi_cancellable_work.context import RequestContext
from fastapi_cancellable_work.outcome import Outcome


class OutcomeHook:
    """Observer awaited once per request with the decided outcome. No-op by default.

    Runs after the connection has been handled; ``ctx.request.body()`` is no
    longer readable at this point.
    """

    async def on_outcome(self, ctx: RequestContext, outcome: Outcome) -> None:
        pass


class AfterOutcome(OutcomeHook):
    """Convenience hook wrapping a single async callback."""

    def __init__(self, callback: OutcomeCallback) -> None:
        self._callback = callback

    async def on_outcome(self, ctx: RequestContext, outcome: Outcome) -> None:
        await self._callback(ctx, outcome)
