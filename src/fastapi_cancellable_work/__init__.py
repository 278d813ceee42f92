"""FastAPI Cancellable Work - a fixed-delay endpoint that gives up when the client leaves."""

from fastapi_cancellable_work.app import create_app
from fastapi_cancellable_work.cancellation import CancellationSignal, watch_disconnect
from fastapi_cancellable_work.context import RequestContext
from fastapi_cancellable_work.exceptions import WorkCancelled, WorkException
from fastapi_cancellable_work.handler import WorkHandler
from fastapi_cancellable_work.hooks import AfterOutcome, OutcomeHook
from fastapi_cancellable_work.outcome import Cancelled, Completed, Outcome
from fastapi_cancellable_work.work import RESPONSE_BODY, WORK_DELAY, simulate_work

__all__ = [
    "RESPONSE_BODY",
    "WORK_DELAY",
    "AfterOutcome",
    "CancellationSignal",
    "Cancelled",
    "Completed",
    "Outcome",
    "OutcomeHook",
    "RequestContext",
    "WorkCancelled",
    "WorkException",
    "WorkHandler",
    "create_app",
    "simulate_work",
    "watch_disconnect",
]
