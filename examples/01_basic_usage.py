"""
Basic usage example of fastapi-cancellable-work.

Demonstrates:
- Building the application with create_app
- Observing each request's outcome with an AfterOutcome hook
- Serving it with uvicorn
"""

import logging

from fastapi_cancellable_work import (
    AfterOutcome,
    Cancelled,
    Outcome,
    RequestContext,
    create_app,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")


async def report(ctx: RequestContext, outcome: Outcome) -> None:
    """Print how long each request took and how it ended."""
    kind = "cancelled" if isinstance(outcome, Cancelled) else "completed"
    path = ctx.request.url.path
    print(f"{ctx.request.method} {path}: {kind} after {outcome.elapsed_ms:.0f}ms")


app = create_app(hooks=[AfterOutcome(report)])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)

    # Test with:
    # curl http://localhost:8080/
    # curl -m 0.5 http://localhost:8080/
