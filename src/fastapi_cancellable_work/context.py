"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request

from fastapi_cancellable_work.cancellation import CancellationSignal


@dataclass
class RequestContext:
    """Per-request container pairing the request with its cancellation signal.

    The request body is drained by the disconnect watcher, so ``request`` is
    only good for metadata (method, path, headers, client); reading its body
    raises ``ClientDisconnect``.
    """

    request: Request
    signal: CancellationSignal = field(default_factory=CancellationSignal)
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def cancelled(self) -> bool:
        return self.signal.cancelled
