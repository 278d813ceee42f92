"""simulate_work() — the fixed-delay unit of work raced against cancellation."""

from __future__ import annotations

import asyncio
import time

from fastapi_cancellable_work.context import RequestContext
from fastapi_cancellable_work.exceptions import WorkCancelled
from fastapi_cancellable_work.outcome import Completed

WORK_DELAY = 2.0
RESPONSE_BODY = b"request processed"


async def simulate_work(
    ctx: RequestContext,
    *,
    delay: float = WORK_DELAY,
    body: bytes = RESPONSE_BODY,
) -> Completed:
    """Wait ``delay`` seconds unless ``ctx.signal`` fires first.

    Resumes on whichever event comes first and discards the other. Raises
    ``WorkCancelled`` if the signal won, otherwise returns the completed
    outcome carrying ``body``. When both are ready at once the signal wins.
    """
    start = time.perf_counter()
    timer = asyncio.create_task(asyncio.sleep(delay))
    cancelled = asyncio.create_task(ctx.signal.wait())

    try:
        done, _ = await asyncio.wait(
            {timer, cancelled}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        timer.cancel()
        cancelled.cancel()
        await asyncio.gather(timer, cancelled, return_exceptions=True)

    elapsed = (time.perf_counter() - start) * 1000
    if cancelled in done:
        raise WorkCancelled(elapsed_ms=elapsed)
    return Completed(body=body, elapsed_ms=elapsed)
