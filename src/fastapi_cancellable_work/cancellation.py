"""CancellationSignal and the ASGI disconnect watcher that fires it."""

from __future__ import annotations

import asyncio

from starlette.types import Receive


class CancellationSignal:
    """One-shot notification raised when the client connection goes away."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


async def watch_disconnect(receive: Receive, signal: CancellationSignal) -> None:
    """Consume ASGI messages until ``http.disconnect``, then fire ``signal``.

    Request body chunks are read and dropped.
    """
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            signal.cancel()
            return
