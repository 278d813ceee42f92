"""WorkHandler — ASGI endpoint that writes the work result or abandons the request."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence

from starlette.requests import ClientDisconnect, Request
from starlette.responses import PlainTextResponse
from starlette.types import Receive, Scope, Send

from fastapi_cancellable_work.cancellation import watch_disconnect
from fastapi_cancellable_work.context import RequestContext
from fastapi_cancellable_work.exceptions import WorkCancelled
from fastapi_cancellable_work.hooks import OutcomeHook
from fastapi_cancellable_work.outcome import Cancelled, Completed, Outcome
from fastapi_cancellable_work.work import WORK_DELAY, simulate_work

logger = logging.getLogger(__name__)


class WorkHandler:
    """Race the fixed delay against client disconnect and act on the winner.

    Exactly one outcome is produced per request: either the response body is
    written, or ``request cancelled`` is logged and the connection is left
    without a response.
    """

    def __init__(
        self,
        *,
        delay: float = WORK_DELAY,
        hooks: Sequence[OutcomeHook] = (),
    ) -> None:
        self._delay = delay
        self._hooks = tuple(hooks)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        ctx = RequestContext(request=Request(scope, receive))
        watcher = asyncio.create_task(watch_disconnect(receive, ctx.signal))
        try:
            outcome = await self.handle(ctx)
        finally:
            watcher.cancel()
            await asyncio.gather(watcher, return_exceptions=True)

        if isinstance(outcome, Completed):
            # A failed write means the client is gone; the result is discarded.
            with contextlib.suppress(OSError, ClientDisconnect):
                await PlainTextResponse(outcome.body)(scope, receive, send)

        for hook in self._hooks:
            await hook.on_outcome(ctx, outcome)

    async def handle(self, ctx: RequestContext) -> Outcome:
        try:
            completed = await simulate_work(ctx, delay=self._delay)
        except WorkCancelled as exc:
            logger.info(exc.detail)
            return Cancelled(elapsed_ms=exc.elapsed_ms)

        logger.debug("request processed in %.1fms", completed.elapsed_ms)
        return completed
