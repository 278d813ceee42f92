"""create_app() — FastAPI application routing every request to WorkHandler."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI

from fastapi_cancellable_work.handler import WorkHandler
from fastapi_cancellable_work.hooks import OutcomeHook
from fastapi_cancellable_work.work import WORK_DELAY


def create_app(
    *,
    delay: float = WORK_DELAY,
    hooks: Sequence[OutcomeHook] = (),
) -> FastAPI:
    """Build the application.

    Every path and method is served by a single ``WorkHandler``; the docs and
    OpenAPI routes are turned off so they cannot shadow it.
    """
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.add_route("/{path:path}", WorkHandler(delay=delay, hooks=hooks))
    return app
